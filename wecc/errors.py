class ECError(ValueError):
    '''Base class of every error raised by the curve arithmetic'''


class SingularCurveError(ECError):
    """Curve coefficients give a zero discriminant (4a^3 + 27b^2 == 0)."""


class NotOnCurveError(ECError):
    """Coordinates do not satisfy y^2 = x^3 + ax + b."""


class DomainError(ECError):
    """Division by the additive identity of the arithmetic domain."""


class CurveMismatchError(ECError):
    """Points from two different curves were combined."""
