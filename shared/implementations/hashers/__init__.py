"""Hasher implementations.

This package contains concrete implementations of the Hasher interface.
"""

from shared.implementations.hashers.hashlib_hasher import HashlibHasher

__all__ = ["HashlibHasher"]
