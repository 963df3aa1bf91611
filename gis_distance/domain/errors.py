"""Exception types raised by the distance calculator."""


class DistanceError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(DistanceError, ValueError):
    """Raised when a coordinate is non-numeric or out of range."""


class RangeError(DistanceError, ValueError):
    """Raised when a proposed Earth radius is outside the allowed bounds."""


class UnsupportedFormulaError(DistanceError, ValueError):
    """Raised when a formula identifier is not recognised."""


class ConvergenceError(DistanceError, ArithmeticError):
    """Raised when Vincenty's iteration does not settle within its limit."""

    def __init__(self, message: str, iterations: int):
        super().__init__(message)
        self.iterations = iterations
