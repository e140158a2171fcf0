"""Counter-specific exceptions for compandauth."""

from .base import CompandauthError


class CounterError(CompandauthError):
    """Base exception for counter errors."""
    pass


class InvalidCounterValueError(CounterError):
    """Raised when a counter is built from a value outside the signed 64-bit domain."""
    pass


class CounterOverflowError(CounterError):
    """Raised when issue or revoke would exceed the maximum magnitude."""
    pass


class NegativeRevocationError(CounterError):
    """Raised when revoke is called with a negative count."""
    pass
