from typing import Union, List, Sequence, Optional

from wecc.coordinate import AffinePoint, PointAtInfinity, Point
from wecc.domain import ArithmeticDomain, RealField
from wecc.ecc import EllipticCurve
from wecc.errors import SingularCurveError, NotOnCurveError, DomainError, CurveMismatchError


class ShortWeierstrassCurve(EllipticCurve):
    """
        A short weierstrass elliptic curve has the following form:
            y^2 = x^3 + ax + b  (affine)
        where a, b are coefficients in the domain, either the real numbers or Z/pZ.

        The group law is the chord-and-tangent rule: the line through P and Q (the tangent
        at P when P == Q) meets the curve at a third point R, and P + Q = -R since
        P + Q + R = 0.

        References:
        [1] Guide to elliptic curve cryptography
        [2] SP 800-186
    """

    def __init__(self, domain: ArithmeticDomain, *coeffs: Union[List[int], int, float, None], **kwargs):
        if not isinstance(domain, ArithmeticDomain):
            raise TypeError(f'Unsupported arithmetic domain: {domain!r}')

        # Determine if coefficients are provided directly, in a list, or as keyword arguments
        if len(coeffs) == 1 and isinstance(coeffs[0], (list, tuple)) and len(coeffs[0]) == 2:
            a, b = coeffs[0]  # case 1, like ec = ShortWeierstrassCurve(F, [2, 20])
        elif len(coeffs) == 2:
            a, b = coeffs  # case 2, like ec = ShortWeierstrassCurve(F, 2, 20)
        elif not coeffs and 'a' in kwargs and 'b' in kwargs:
            a = kwargs['a']  # case 3 like ec = ShortWeierstrassCurve(F, a=2, b=20)
            b = kwargs['b']
        else:
            raise ValueError(
                "Coefficients must be provided either as list [a, b], direct numbers a, b, or as separate keyword "
                "arguments a, b")

        self.domain = domain

        # Coefficients as given
        self.a = a
        self.b = b
        # Repr. of a, b in the domain
        self._a = self.domain(a)
        self._b = self.domain(b)

        self._validate_curve()

    def _validate_curve(self):
        """Reject singular curves, i.e. 4a^3 + 27b^2 == 0 in the domain."""
        if self.domain.is_zero(4 * self._a ** 3 + 27 * self._b ** 2):
            raise SingularCurveError(f'Invalid curve parameters a={self.a}, b={self.b}; discriminant is zero.')

    def discriminant(self):
        """Δ = -16(4a³ + 27b²)"""
        return -16 * (4 * self._a ** 3 + 27 * self._b ** 2)

    def __eq__(self, other):
        if not isinstance(other, ShortWeierstrassCurve):
            return NotImplemented
        return (self.domain == other.domain
                and self.domain.equal(self._a, other._a)
                and self.domain.equal(self._b, other._b))

    def __hash__(self):
        if not self.domain.is_finite:
            # coefficients compare within tolerance on the real plane
            return hash(self.domain)
        return hash((self.domain, self._a, self._b))

    def __repr__(self):
        return f"ShortWeierstrassCurve(y^2 = x^3 + {self.a}x + {self.b} over {self.domain})"

    def _rhs(self, x):
        return x ** 3 + self._a * x + self._b

    def _check(self, *points: Point):
        for p in points:
            if isinstance(p, AffinePoint) and p.curve != self:
                raise CurveMismatchError(f'Point {p} belongs to {p.curve}, not to {self}')
            if not isinstance(p, (AffinePoint, PointAtInfinity)):
                raise TypeError(f'Not a curve point: {p!r}')

    def _div(self, num, den):
        if self.domain.is_zero(den):
            raise DomainError(f'Division by zero in {self.domain}')
        return num / den

    def point(self, x, y) -> AffinePoint:
        ''' Validated construction of the affine point (x, y) '''
        p = AffinePoint(self.domain(x), self.domain(y), self)
        if not self.is_point_on_curve(p):
            raise NotOnCurveError(f'Point ({x}, {y}) is not on {self}')
        return p

    def is_point_on_curve(self, point: Union[Sequence, Point]) -> bool:
        """
            Verify if given point is on curve, a "point" format is like
            1) [x, y]: affine coord.
            2) AffinePoint
            3) PointAtInfinity: on every curve
        """
        if isinstance(point, PointAtInfinity):
            return True

        if isinstance(point, AffinePoint):
            if point.curve != self:
                return False
            x, y = point.x, point.y
        elif len(point) == 2:
            x, y = self.domain(point[0]), self.domain(point[1])
        else:
            raise ValueError(f'Unrecognized coordinates: {point}')

        return self.domain.equal(y * y, self._rhs(x))

    def negate(self, p: Point) -> Point:
        self._check(p)
        if p.is_identity_point():
            return p

        return AffinePoint(p.x, -p.y, self)

    def add_points(self, p1: Point, p2: Point) -> Point:
        '''
            Add p1 and p2 on the curve in affine coord.
        '''
        self._check(p1, p2)

        if p1.is_identity_point():
            return p2
        if p2.is_identity_point():
            return p1

        eq = self.domain.equal
        if eq(p1.x, p2.x):
            # P + (-P) = O, this covers the vertical tangent at y == 0 as well
            if eq(p1.y, -p2.y):
                return PointAtInfinity()

            if eq(p1.y, p2.y):
                return self.double_point(p1)

            # unreachable for points on the curve
            raise DomainError(f'Vertical chord between {p1} and {p2} that are not inverse of each other')

        m = self._div(p2.y - p1.y, p2.x - p1.x)
        return self._third_point_negated(m, p1, p2)

    def double_point(self, p: Point) -> Point:
        '''
            Double p on the curve, using the tangent slope (3x^2 + a) / 2y at p.
        '''
        self._check(p)
        if p.is_identity_point():
            return p

        if self.domain.is_zero(p.y):
            return PointAtInfinity()

        m = self._div(3 * p.x * p.x + self._a, 2 * p.y)
        return self._third_point_negated(m, p, p)

    def _third_point_negated(self, m, p1: AffinePoint, p2: AffinePoint) -> AffinePoint:
        """The line of slope m through p1 and p2 meets the curve at (x3, y3), return (x3, -y3)."""
        x3 = m * m - p1.x - p2.x
        y3 = m * (x3 - p1.x) + p1.y
        return AffinePoint(x3, -y3, self)

    def lift_x(self, x) -> List[AffinePoint]:
        ''' All the points on curve at x, ordered by their y-coordinate: none, one (y = 0) or two '''
        x = self.domain(x)
        return [AffinePoint(x, y, self) for y in self.domain.sqrt(self._rhs(x))]

    def points(self) -> List[Point]:
        ''' List the whole group of a curve over a prime field, starting with the point at infinity '''
        if not self.domain.is_finite:
            raise TypeError(f'Cannot enumerate the points of {self}')

        res: List[Point] = [PointAtInfinity()]
        for x in range(self.domain.modulus):
            res.extend(self.lift_x(x))
        return res

    def cardinality(self) -> int:
        return len(self.points())

    @classmethod
    def over_reals(cls, a, b, tolerance: Optional[float] = None) -> 'ShortWeierstrassCurve':
        domain = RealField() if tolerance is None else RealField(tolerance)
        return cls(domain, a=a, b=b)
