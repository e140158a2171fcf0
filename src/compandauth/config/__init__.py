"""Configuration module for compandauth.

Constants, environment-driven settings and logging configuration.
"""

from .constants import CounterLimits, NegativeRevocationPolicy, OverflowPolicy
from .settings import CounterSettings, get_settings
from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    setup_logging,
)

__all__ = [
    # Constants
    "CounterLimits",
    "NegativeRevocationPolicy",
    "OverflowPolicy",
    
    # Settings
    "CounterSettings",
    "get_settings",
    
    # Logging
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "setup_logging",
]
