'''
    The elliptic curve discrete logarithm problem: given P and Q = kP on a curve over
    Z/pZ, recover k. Only feasible for toy-sized fields, which is the point.
'''
from typing import Optional, Dict, Tuple, Union
import logging
import math

from wecc.coordinate import Point
from wecc.short_weierstrass_ecc import ShortWeierstrassCurve

log = logging.getLogger(__name__)


def _require_finite(curve: ShortWeierstrassCurve):
    if not curve.domain.is_finite:
        raise TypeError(f'Discrete logarithms need a curve over a prime field, got {curve}')


def _key(p: Point) -> Union[Tuple[int, int], None]:
    return None if p.is_identity_point() else p.get_integer_coords()


def point_order(curve: ShortWeierstrassCurve, P: Point) -> int:
    ''' Smallest n > 0 such that nP = O '''
    _require_finite(curve)

    # Hasse: #E <= p + 1 + 2*sqrt(p)
    bound = curve.domain.modulus + 1 + 2 * math.isqrt(curve.domain.modulus) + 2

    n, R = 1, P
    while not R.is_identity_point():
        R = curve.add_points(R, P)
        n += 1
        if n > bound:
            raise ValueError(f'{P} has no finite order on {curve}')
    return n


def discrete_log_brute(curve: ShortWeierstrassCurve, P: Point, Q: Point) -> int:
    ''' Smallest k >= 0 with kP = Q, by walking through the multiples of P '''
    _require_finite(curve)
    n = point_order(curve, P)

    R = curve.identity()
    for k in range(n):
        if R == Q:
            return k
        R = curve.add_points(R, P)

    raise ValueError(f'{Q} is not a multiple of {P}')


def discrete_log_bsgs(curve: ShortWeierstrassCurve, P: Point, Q: Point, order: Optional[int] = None) -> int:
    ''' Shanks' baby-step giant-step, O(sqrt(n)) time and space for n the order of P
            baby steps:  jP for j in [0, m)
            giant steps: Q - i(mP) for i in [0, m), a hit on jP gives k = im + j
    '''
    _require_finite(curve)
    n = order if order else point_order(curve, P)
    m = math.isqrt(n - 1) + 1

    baby: Dict[Union[Tuple[int, int], None], int] = {}
    R = curve.identity()
    for j in range(m):
        baby.setdefault(_key(R), j)
        R = curve.add_points(R, P)

    giant = curve.negate(curve.k_point(m, P))
    log.debug('bsgs: n=%d, m=%d, %d baby steps', n, m, len(baby))

    gamma = Q
    for i in range(m):
        j = baby.get(_key(gamma))
        if j is not None:
            return i * m + j
        gamma = curve.add_points(gamma, giant)

    raise ValueError(f'{Q} is not a multiple of {P}')
