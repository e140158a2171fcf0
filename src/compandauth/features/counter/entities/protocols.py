"""Protocol interfaces for the counter feature."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class CAAProtocol(Protocol):
    """Protocol for compromise-aware session state of one credential."""
    
    @abstractmethod
    def is_locked(self) -> bool:
        """Check if the credential is locked."""
        ...
    
    @abstractmethod
    def lock(self) -> None:
        """Lock the credential so no session validates."""
        ...
    
    @abstractmethod
    def unlock(self) -> None:
        """Unlock the credential."""
        ...
    
    @abstractmethod
    def issue(self) -> int:
        """Mint the next session sequence number."""
        ...
    
    @abstractmethod
    def revoke(self, n: int) -> None:
        """Invalidate previously issued sessions."""
        ...
    
    @abstractmethod
    def is_valid(self, session_caa: int, delta: int) -> bool:
        """Check if a session is still accepted."""
        ...
