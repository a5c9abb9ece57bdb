"""hashlib-backed hasher implementation."""

import hashlib
from shared.interfaces.hasher import Hasher


class HashlibHasher(Hasher):
    """Resettable wrapper around a hashlib object.
    
    hashlib objects cannot be reset in place, so each instance keeps a
    pristine prototype and resets by copying it. The prototype is private
    to the instance; copies never share state.
    """
    
    def __init__(self, algorithm: str) -> None:
        # Raises ValueError for names hashlib does not know
        self._prototype = hashlib.new(algorithm, usedforsecurity=False)
        self._algorithm = algorithm
        self._state = self._prototype.copy()
    
    @property
    def algorithm(self) -> str:
        return self._algorithm
    
    @property
    def digest_size(self) -> int:
        return self._prototype.digest_size
    
    def reset(self) -> None:
        self._state = self._prototype.copy()
    
    def update(self, data: bytes) -> None:
        self._state.update(data)
    
    def digest(self) -> bytes:
        return self._state.digest()
