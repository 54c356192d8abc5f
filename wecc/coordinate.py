from dataclasses import dataclass
from typing import Tuple, Union, Any


class PointAtInfinity:
    '''Singleton repr. of the infinite point, the identity of every curve group'''
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(PointAtInfinity, cls).__new__(cls)
        return cls._instance

    def is_identity_point(self):
        return True

    def __neg__(self):
        return self

    def __add__(self, other):
        if isinstance(other, (PointAtInfinity, AffinePoint)):
            return other
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (PointAtInfinity, AffinePoint)):
            return -other
        return NotImplemented

    def __mul__(self, k):
        if isinstance(k, int):
            return self
        return NotImplemented

    __rmul__ = __mul__

    def __repr__(self):
        return "InfinitePoint"


@dataclass(frozen=True, eq=False)
class AffinePoint:
    '''
        A finite point (x, y) on {curve}, coordinates are values of the curve's domain.
        The constructor is internal to the curve and does not check the curve equation,
        so arithmetic on a hand-built off-curve point is undefined.
        Build points through `curve.point(x, y)`, which raises NotOnCurveError:
            $ E = ShortWeierstrassCurve(PrimeField(29), [2, 20])
            $ P = E.point(18, 28)
            $ Q = 3 * P - P
    '''
    x: Any
    y: Any
    curve: Any

    def is_identity_point(self):
        return False

    def get_affine_coords(self) -> Tuple[Any, Any]:
        return self.x, self.y

    def get_integer_coords(self) -> Tuple[int, int]:
        """Coordinates in raw integer type, for points over a prime field."""
        if not self.curve.domain.is_finite:
            raise TypeError(f'Point {self} has real coordinates')
        return int(self.x), int(self.y)

    def __eq__(self, other):
        if isinstance(other, PointAtInfinity):
            return False
        if not isinstance(other, AffinePoint):
            return NotImplemented
        if self.curve != other.curve:
            return False

        domain = self.curve.domain
        return domain.equal(self.x, other.x) and domain.equal(self.y, other.y)

    __hash__ = None

    def __neg__(self):
        return self.curve.negate(self)

    def __add__(self, other):
        if isinstance(other, (PointAtInfinity, AffinePoint)):
            return self.curve.add_points(self, other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (PointAtInfinity, AffinePoint)):
            return self.curve.add_points(self, -other)
        return NotImplemented

    def __mul__(self, k):
        if isinstance(k, int):
            return self.curve.k_point(k, self)
        return NotImplemented

    __rmul__ = __mul__

    def __repr__(self):
        return f"AffinePoint(x={self.x}, y={self.y})"


Point = Union[PointAtInfinity, AffinePoint]
