from wecc.errors import ECError, SingularCurveError, NotOnCurveError, DomainError, CurveMismatchError
from wecc.domain import RealField, PrimeField, PrimeFieldElement, DEFAULT_TOLERANCE
from wecc.coordinate import PointAtInfinity, AffinePoint, Point
from wecc.ecc import EllipticCurve, MultiplicationTrace
from wecc.short_weierstrass_ecc import ShortWeierstrassCurve

__version__ = '0.1.0'
