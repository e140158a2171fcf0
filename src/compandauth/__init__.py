"""Compandauth - compromise-aware session counters for credential authentication.

A single signed integer per credential records whether the credential is
locked and how many sessions were issued or revoked against it. Session
management layers persist that integer and ask it whether a presented
session is still valid.
"""

from .__version__ import __version__

from .config import (
    CounterLimits,
    CounterSettings,
    LoggingConfig,
    NegativeRevocationPolicy,
    OverflowPolicy,
    get_settings,
    setup_logging,
)

# Initialize logging configuration on import
if get_settings().configure_logging:
    setup_logging()

from .core.exceptions import (
    CompandauthError,
    ConfigurationError,
    CounterError,
    CounterOverflowError,
    InvalidCounterValueError,
    NegativeRevocationError,
)

from .features.counter import CAAProtocol, Counter, SessionCAA

__all__ = [
    "__version__",
    
    # Configuration
    "CounterLimits",
    "CounterSettings",
    "LoggingConfig",
    "NegativeRevocationPolicy",
    "OverflowPolicy",
    "get_settings",
    "setup_logging",
    
    # Exceptions
    "CompandauthError",
    "ConfigurationError",
    "CounterError",
    "CounterOverflowError",
    "InvalidCounterValueError",
    "NegativeRevocationError",
    
    # Counter
    "CAAProtocol",
    "Counter",
    "SessionCAA",
]
