"""Configuration loaded from environment variables."""

import os
from typing import List


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


def _get_env_float(key: str, default: str) -> float:
    """Get float environment variable with validation."""
    try:
        return float(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid float value for {key}")


class Config:
    """Centralized configuration from environment variables."""

    # Hash fan-out pool: number of hashing threads per match run
    # 1 = sequential hashing, >1 = parallel hashing
    WORKER_THREADS: int = _get_env_int("WORKER_THREADS", "4")
    MAX_WORKER_THREADS: int = _get_env_int("MAX_WORKER_THREADS", "64")

    # Capacity of the candidate queue between the wordlist reader and the workers.
    # The reader blocks when it is full, so memory stays flat on huge wordlists.
    INPUT_QUEUE_SIZE: int = _get_env_int("INPUT_QUEUE_SIZE", "500")

    # How long a blocked put/get waits before re-checking cancellation (seconds)
    QUEUE_POLL_INTERVAL: float = _get_env_float("QUEUE_POLL_INTERVAL", "0.05")

    # Algorithms applied when the caller does not name any
    _default_algorithms_str = os.getenv("DEFAULT_ALGORITHMS", "md5,sha1,sha256,sha512")
    DEFAULT_ALGORITHMS: List[str] = [
        name.strip().lower()
        for name in _default_algorithms_str.split(",")
        if name.strip()
    ]


config = Config()
