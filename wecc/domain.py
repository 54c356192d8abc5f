from abc import ABC, abstractmethod
from typing import Union
import math

from sympy.ntheory import isprime, sqrt_mod

from wecc.errors import DomainError
from wecc.utils import mod_inv

# relative and absolute tolerance of coordinate comparisons on the real plane
DEFAULT_TOLERANCE = 1e-9


class ArithmeticDomain(ABC):
    '''
        Arithmetic domain for curve coordinates and coefficients. Calling the domain
        maps a raw number into the domain, e.g.
            $ F = PrimeField(29)
            $ x = F(31)  # 2 mod 29
    '''

    @abstractmethod
    def __call__(self, value):
        pass

    @abstractmethod
    def is_zero(self, value) -> bool:
        """Is the value the additive identity of the domain."""
        pass

    @abstractmethod
    def equal(self, u, v) -> bool:
        """Domain equality of two values."""
        pass

    @property
    def is_finite(self) -> bool:
        return False


class RealField(ArithmeticDomain):
    '''The real numbers as python floats, compared within {tolerance}'''

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE):
        if tolerance < 0:
            raise ValueError(f'Tolerance must be non-negative, got {tolerance}')
        self.tolerance = tolerance

    def __call__(self, value) -> float:
        return float(value)

    def is_zero(self, value) -> bool:
        return abs(value) <= self.tolerance

    def equal(self, u, v) -> bool:
        return math.isclose(u, v, rel_tol=self.tolerance, abs_tol=self.tolerance)

    def sqrt(self, value: float):
        """Square roots of value in increasing order (one if it is zero, none if negative)."""
        if self.is_zero(value):
            return [0.0]
        if value < 0:
            return []
        r = math.sqrt(value)
        return [-r, r]

    def __eq__(self, other):
        if not isinstance(other, RealField):
            return NotImplemented
        return self.tolerance == other.tolerance

    def __hash__(self):
        return hash(('R', self.tolerance))

    def __repr__(self):
        return f'RealField(tolerance={self.tolerance})'


class PrimeField(ArithmeticDomain):
    '''Z/pZ for a prime p > 3'''

    def __init__(self, p: int):
        if not isinstance(p, int):
            raise TypeError(f'Field modulus must be an integer, got {type(p).__name__}')
        if p <= 3 or not isprime(p):
            raise ValueError(f'Field modulus must be a prime greater than 3, got {p}')
        self.modulus = p

    def __call__(self, value) -> 'PrimeFieldElement':
        if isinstance(value, PrimeFieldElement):
            if value.field != self:
                raise ValueError(f'Element {value} does not belong to {self}')
            return value
        if not isinstance(value, int):
            raise TypeError(f'Cannot map non-integral {type(value).__name__} {value!r} into {self}')
        return PrimeFieldElement(value % self.modulus, self)

    def is_zero(self, value) -> bool:
        return int(value) % self.modulus == 0

    def equal(self, u, v) -> bool:
        return (int(u) - int(v)) % self.modulus == 0

    def sqrt(self, value: 'PrimeFieldElement'):
        """All square roots of value in the field, in increasing order."""
        roots = sqrt_mod(int(value), self.modulus, all_roots=True) or []
        return [self(int(r)) for r in sorted(roots)]

    @property
    def is_finite(self) -> bool:
        return True

    def __eq__(self, other):
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.modulus == other.modulus

    def __hash__(self):
        return hash(('GF', self.modulus))

    def __repr__(self):
        return f'PrimeField({self.modulus})'


class PrimeFieldElement:
    __slots__ = ('value', 'field')

    def __init__(self, value: int, field: PrimeField):
        self.value = value
        self.field = field

    def _coerce(self, other) -> Union['PrimeFieldElement', None]:
        if isinstance(other, PrimeFieldElement):
            if other.field != self.field:
                raise ValueError(f'Cannot mix elements of {self.field} and {other.field}')
            return other
        if isinstance(other, int):
            return self.field(other)
        return None

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == other % self.field.modulus  # convenient comparison with raw integers

        if isinstance(other, PrimeFieldElement):
            return self.value == other.value and self.field == other.field

        return NotImplemented

    def __hash__(self):
        # agrees with the reduced raw integer, F(3) == 3; unreduced integers compare equal but hash apart
        return hash(self.value)

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return PrimeFieldElement((self.value + other.value) % self.field.modulus, self.field)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return PrimeFieldElement((self.value - other.value) % self.field.modulus, self.field)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__sub__(self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return PrimeFieldElement((self.value * other.value) % self.field.modulus, self.field)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other.value == 0:
            raise DomainError(f'Division by zero in {self.field}')
        inverse = mod_inv(other.value, self.field.modulus)
        return PrimeFieldElement((self.value * inverse) % self.field.modulus, self.field)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__truediv__(self)

    def __neg__(self):
        return PrimeFieldElement(-self.value % self.field.modulus, self.field)

    def __pow__(self, exponent: int):
        if exponent < 0:
            return (1 / self) ** -exponent
        return PrimeFieldElement(pow(self.value, exponent, self.field.modulus), self.field)

    def __int__(self):
        return self.value

    def __bool__(self):
        return self.value != 0

    def __repr__(self):
        return f"{self.value} mod {self.field.modulus}"
