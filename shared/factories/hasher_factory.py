"""Factory for creating hasher instances."""

from typing import Callable
from shared.interfaces.hasher import Hasher
from shared.implementations.hashers import HashlibHasher
from shared.domain.consts import HashAlgorithm
from shared.exceptions import UnknownAlgorithmError


# Type of anything that can produce a fresh hasher for an algorithm id
HasherFactory = Callable[[str], Hasher]

HASHERS: dict[str, type[Hasher]] = {
    algorithm.value: HashlibHasher for algorithm in HashAlgorithm
}


def create_hasher(algorithm: str) -> Hasher:
    """Factory for creating a fresh, reset hasher.
    
    Every call returns a new instance; callers own it exclusively.
    
    Returns:
        Hasher instance for the algorithm
        
    Raises:
        UnknownAlgorithmError: If algorithm is not registered
    """
    name = algorithm.strip().lower()
    try:
        hasher_cls = HASHERS[name]
    except KeyError:
        raise UnknownAlgorithmError(algorithm)
    return hasher_cls(name)


def validate_algorithms(algorithms: list[str]) -> list[str]:
    """Normalize algorithm ids and fail fast on unknown ones.
    
    Returns:
        Lowercased algorithm ids in the given order, without duplicates
        
    Raises:
        UnknownAlgorithmError: On the first unknown id
        ValueError: If no algorithms are given
    """
    if not algorithms:
        raise ValueError("At least one hash algorithm is required")
    
    names: list[str] = []
    for algorithm in algorithms:
        name = algorithm.strip().lower()
        if name not in HASHERS:
            raise UnknownAlgorithmError(algorithm)
        if name not in names:
            names.append(name)
    return names
