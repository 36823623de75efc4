"""
Error types raised by surrogates and by the derived operations.
"""


class SurrogateError(Exception):
    """Base class for all surrogate contract errors."""


class DomainMismatchError(SurrogateError, TypeError):
    """A point is not a member of the surrogate's domain."""


class LengthMismatchError(SurrogateError, ValueError):
    """Paired sequences have unequal or unexpected lengths."""


class NotFittedError(SurrogateError, RuntimeError):
    """A statistic was requested before any data was added."""
