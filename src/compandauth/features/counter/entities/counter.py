"""Compromise-aware session counter.

A Counter packs two facts about one credential into a single signed 64-bit
integer. The sign is the lock bit: a negative value means the credential is
considered compromised and no session presented against it is valid. The
magnitude is the number of sessions ever issued or revoked for the
credential and only ever grows.

Callers persist ``int(counter)`` after every mutation and serialize access
to a given credential's counter themselves.
"""

import logging
from dataclasses import dataclass, field
from typing import NewType, Optional

from ....config.constants import CounterLimits, NegativeRevocationPolicy, OverflowPolicy
from ....config.settings import get_settings
from ....core.exceptions.base import ConfigurationError
from ....core.exceptions.counter import (
    CounterOverflowError,
    InvalidCounterValueError,
    NegativeRevocationError,
)

logger = logging.getLogger(__name__)


SessionCAA = NewType("SessionCAA", int)


def _check_integer(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCounterValueError(
            f"Counter {name} must be an integer, got {type(value).__name__}",
            details={name: repr(value)}
        )


def _check_value(value) -> None:
    """Reject anything outside the signed 64-bit counter domain."""
    _check_integer("value", value)
    if not CounterLimits.MIN_VALUE <= value <= CounterLimits.MAX_VALUE:
        raise InvalidCounterValueError(
            f"Counter value {value} is outside the signed 64-bit counter domain",
            details={
                "value": value,
                "min_value": CounterLimits.MIN_VALUE,
                "max_value": CounterLimits.MAX_VALUE,
            }
        )


@dataclass
class Counter:
    """Signed issuance counter for one credential.
    
    Equality and repr only consider the stored value, which is checked
    against the counter domain on every assignment. The boundary policies
    fall back to ``get_settings()`` when not given.
    """
    
    value: int = 0
    overflow_policy: Optional[OverflowPolicy] = field(default=None, compare=False, repr=False)
    negative_revocation_policy: Optional[NegativeRevocationPolicy] = field(
        default=None, compare=False, repr=False
    )
    warn_on_unissued_lock: Optional[bool] = field(default=None, compare=False, repr=False)
    
    def __setattr__(self, name, value):
        if name == "value":
            _check_value(value)
        super().__setattr__(name, value)
    
    def __post_init__(self):
        """Resolve policies left unset from the settings."""
        settings = get_settings()
        self.overflow_policy = self._resolve_policy(
            OverflowPolicy, self.overflow_policy, settings.overflow_policy
        )
        self.negative_revocation_policy = self._resolve_policy(
            NegativeRevocationPolicy,
            self.negative_revocation_policy,
            settings.negative_revocation_policy,
        )
        if self.warn_on_unissued_lock is None:
            self.warn_on_unissued_lock = settings.warn_on_unissued_lock
    
    @staticmethod
    def _resolve_policy(policy_type, policy, default):
        if policy is None:
            return default
        try:
            return policy_type(policy)
        except ValueError:
            raise ConfigurationError(
                f"Unknown {policy_type.__name__}: {policy!r}",
                details={"allowed": [member.value for member in policy_type]}
            ) from None
    
    def __int__(self) -> int:
        return self.value
    
    @property
    def magnitude(self) -> int:
        """Number of sessions ever issued or revoked."""
        return abs(self.value)
    
    def is_locked(self) -> bool:
        """Check if the credential is locked."""
        return self.value < 0
    
    def lock(self) -> None:
        """Lock the credential, keeping the magnitude.
        
        A counter that has never issued stays at zero, which still reads as
        unlocked. Its sessions are invalid anyway because nothing was issued,
        but the lock does not survive the next issue().
        """
        if self.value > 0:
            self.value = -self.value
            logger.debug(f"Counter locked at magnitude {self.magnitude}")
        elif self.value == 0 and self.warn_on_unissued_lock:
            logger.warning("Lock requested on a counter that has never issued; it remains unlocked")
    
    def unlock(self) -> None:
        """Unlock the credential, keeping the magnitude."""
        if self.value < 0:
            self.value = -self.value
            logger.debug(f"Counter unlocked at magnitude {self.magnitude}")
    
    def issue(self) -> SessionCAA:
        """Mint the next session sequence number.
        
        Returns the magnitude before the call and advances it by one without
        changing the lock state. Issuing while locked still works; those
        sessions never validate.
        
        Raises:
            CounterOverflowError: magnitude is already at its maximum and the
                overflow policy is FAIL
        """
        session_caa = SessionCAA(self.magnitude)
        self._advance(1)
        logger.debug(f"Issued session {session_caa}, counter now {self.value}")
        return session_caa
    
    def revoke(self, n: int) -> None:
        """Advance the magnitude by ``n`` without minting a session.
        
        Every session whose sequence number plus the validation slack falls
        below the new magnitude becomes invalid. Has no effect on a counter
        that has never issued.
        
        Raises:
            InvalidCounterValueError: ``n`` is not an integer
            NegativeRevocationError: ``n`` is negative and the policy is REJECT
            CounterOverflowError: the new magnitude would exceed its maximum and
                the overflow policy is FAIL
        """
        _check_integer("n", n)
        if n < 0:
            if self.negative_revocation_policy is NegativeRevocationPolicy.REJECT:
                raise NegativeRevocationError(
                    f"Cannot revoke a negative number of sessions: {n}",
                    details={"n": n, "value": self.value}
                )
            logger.warning(f"Negative revocation count {n} clamped to 0")
            return
        
        if self.value == 0:
            return
        
        self._advance(n)
        logger.debug(f"Revoked {n} sessions, counter now {self.value}")
    
    def is_valid(self, session_caa: int, delta: int) -> bool:
        """Check if a previously issued session is still accepted.
        
        Args:
            session_caa: Sequence number the session received from issue()
            delta: Number of later issuances/revocations tolerated
            
        Returns:
            False while locked or before any issue, otherwise whether
            ``session_caa + delta`` reaches the current counter value
        """
        if self.is_locked():
            return False
        if self.value == 0:
            return False
        return session_caa + delta >= self.value
    
    def _advance(self, n: int) -> None:
        magnitude = self.magnitude + n
        if magnitude > CounterLimits.MAX_MAGNITUDE:
            if self.overflow_policy is OverflowPolicy.FAIL:
                raise CounterOverflowError(
                    f"Advancing counter {self.value} by {n} exceeds the maximum magnitude",
                    details={
                        "value": self.value,
                        "n": n,
                        "max_magnitude": CounterLimits.MAX_MAGNITUDE,
                    }
                )
            logger.warning(f"Counter {self.value} saturated at the maximum magnitude")
            magnitude = CounterLimits.MAX_MAGNITUDE
        
        self.value = -magnitude if self.value < 0 else magnitude
