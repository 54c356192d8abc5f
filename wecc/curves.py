'''
    Named curve parameters.
    NIST P-256 parameters are taken from SP 800-186, secp256k1 from SEC 2.
'''
import re

from wecc.domain import PrimeField, RealField
from wecc.short_weierstrass_ecc import ShortWeierstrassCurve


def remove_whitespace(text):
    """Removes all whitespace from passed in string"""
    return re.sub(r"\s+", "", text, flags=re.UNICODE)


#region y^2 = x^3 - 5x + 2 over the reals, the chord-and-tangent pictures
BLOG_CURVE = ShortWeierstrassCurve(RealField(), a=-5, b=2)
BLOG_P = BLOG_CURVE.point(-2, -2)
#endregion

#region toy curve y^2 = x^3 + 2x + 20 over Z/29Z
TOY_CURVE = ShortWeierstrassCurve(PrimeField(29), a=2, b=20)
TOY_G = TOY_CURVE.point(18, 28)
#endregion

#region secp256k1
_p = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_n = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

SECP256K1 = ShortWeierstrassCurve(PrimeField(_p), a=0, b=7)
SECP256K1_G = SECP256K1.point(_Gx, _Gy)
SECP256K1_N = _n
#endregion

#region NIST Curve P-256
_p = int(
    remove_whitespace(
        """
    1157920892103562487626974469494075735300861434152903141955
    33631308867097853951"""
    )
)
_n = int(
    remove_whitespace(
        """
    115792089210356248762697446949407573529996955224135760342
    422259061068512044369"""
    )
)
_b = int(
    remove_whitespace(
        """
    5AC635D8 AA3A93E7 B3EBBD55 769886BC 651D06B0 CC53B0F6
    3BCE3C3E 27D2604B"""
    ),
    16,
)
_Gx = int(
    remove_whitespace(
        """
    6B17D1F2 E12C4247 F8BCE6E5 63A440F2 77037D81 2DEB33A0
    F4A13945 D898C296"""
    ),
    16,
)
_Gy = int(
    remove_whitespace(
        """
    4FE342E2 FE1A7F9B 8EE7EB4A 7C0F9E16 2BCE3357 6B315ECE
    CBB64068 37BF51F5"""
    ),
    16,
)

P256 = ShortWeierstrassCurve(PrimeField(_p), a=-3, b=_b)
P256_G = P256.point(_Gx, _Gy)
P256_N = _n
#endregion

_NAMED = {
    'blog': (BLOG_CURVE, BLOG_P),
    'toy29': (TOY_CURVE, TOY_G),
    'secp256k1': (SECP256K1, SECP256K1_G),
    'p256': (P256, P256_G),
}


def named_curve(name: str):
    ''' Look up a (curve, base point) pair by name, e.g. named_curve('secp256k1') '''
    try:
        return _NAMED[name.lower()]
    except KeyError:
        raise KeyError(f'Unknown curve {name!r}, choose one of {sorted(_NAMED)}') from None
