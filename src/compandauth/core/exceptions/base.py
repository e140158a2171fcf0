"""Base exceptions for compandauth.

This module defines the base exception hierarchy for the compandauth library.
All exceptions inherit from CompandauthError and carry an error code and
details for structured reporting.
"""

from typing import Any, Dict, Optional


class CompandauthError(Exception):
    """Base exception for all compandauth errors.
    
    All exceptions in the compandauth library inherit from this base class
    and include structured error information for better debugging and for
    callers that surface errors through their own APIs.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(CompandauthError):
    """Raised when a counter is given an unknown policy."""
    pass

