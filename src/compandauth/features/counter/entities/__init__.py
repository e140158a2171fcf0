"""Counter feature entities.

Contains the counter domain object and its protocol interface.
"""

from .counter import Counter, SessionCAA
from .protocols import CAAProtocol

__all__ = [
    # Domain entities
    "Counter",
    "SessionCAA",
    # Protocols
    "CAAProtocol",
]
