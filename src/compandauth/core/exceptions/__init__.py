"""Exceptions module for compandauth."""

from .base import (
    CompandauthError,
    ConfigurationError,
)
from .counter import (
    CounterError,
    CounterOverflowError,
    InvalidCounterValueError,
    NegativeRevocationError,
)

__all__ = [
    "CompandauthError",
    "ConfigurationError",
    "CounterError",
    "CounterOverflowError",
    "InvalidCounterValueError",
    "NegativeRevocationError",
]
