"""Scanner business logic services."""

from scanner.services.hash_pool import HashFanoutPool
from scanner.services.coordinator import (
    MatchCoordinator,
    find_match,
    matches,
    find_hashed_match,
    matches_hashed,
)

__all__ = [
    "HashFanoutPool",
    "MatchCoordinator",
    "find_match",
    "matches",
    "find_hashed_match",
    "matches_hashed",
]
