from typing import List, Tuple


def bits_lsb_first(k: int) -> List[int]:
    ''' Binary decomposition of a non-negative integer, least significant bit first
        e.g.
            >>> bits_lsb_first(250)  # 0b11111010
            [0, 1, 0, 1, 1, 1, 1, 1]
            >>> bits_lsb_first(0)
            []
    '''
    if k < 0:
        raise ValueError(f'Cannot decompose negative integer {k}')

    bits = []
    while k > 0:
        bits.append(k & 1)
        k >>= 1
    return bits


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, s, t) such that a*s + b*t == g == gcd(a, b)."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    return old_r, old_s, old_t


def mod_inv(a: int, p: int) -> int:
    '''Multiplicative inverse of a modulo p'''
    g, s, _ = extended_gcd(a % p, p)
    if g != 1:
        raise ZeroDivisionError(f'{a} has no inverse modulo {p}')
    return s % p
