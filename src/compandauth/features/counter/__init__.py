"""Counter feature: lock state and session issuance in one signed integer."""

from .entities import CAAProtocol, Counter, SessionCAA

__all__ = [
    "CAAProtocol",
    "Counter",
    "SessionCAA",
]
