"""Constants and enums for compandauth.

Numeric limits of the counter encoding and the policy enums that decide
what happens at the edges of that encoding.
"""

from enum import Enum
from typing import Final


class CounterLimits:
    """Bounds of the signed 64-bit counter domain."""
    
    MAX_MAGNITUDE: Final[int] = 2**63 - 1
    MAX_VALUE: Final[int] = MAX_MAGNITUDE
    # -2**63 is excluded: it has no positive counterpart to flip to.
    MIN_VALUE: Final[int] = -MAX_MAGNITUDE


class OverflowPolicy(str, Enum):
    """Behaviour when issue/revoke would push the magnitude past its maximum."""
    
    FAIL = "fail"
    SATURATE = "saturate"


class NegativeRevocationPolicy(str, Enum):
    """Behaviour when revoke is called with a negative count."""
    
    REJECT = "reject"
    CLAMP = "clamp"
