"""Abstract hasher interface."""

from abc import ABC, abstractmethod


class Hasher(ABC):
    """Abstract resettable hasher bound to one algorithm.
    
    A Hasher is stateful and must never be shared between threads.
    Each worker creates its own instances and reuses them:
    - reset: Discard any accumulated input
    - update: Feed candidate bytes
    - digest: Return the digest of everything fed since the last reset
    """
    
    @property
    @abstractmethod
    def algorithm(self) -> str:
        """Algorithm identifier this hasher computes."""
        pass
    
    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Size of the produced digest in bytes."""
        pass
    
    @abstractmethod
    def reset(self) -> None:
        """Return the hasher to its initial, empty state."""
        pass
    
    @abstractmethod
    def update(self, data: bytes) -> None:
        """Feed bytes into the hasher.
        
        Args:
            data: Candidate bytes
        """
        pass
    
    @abstractmethod
    def digest(self) -> bytes:
        """Return the digest of the bytes fed since the last reset.
        
        Does not reset the hasher.
        """
        pass
