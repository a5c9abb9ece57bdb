"""Status enums for match runs."""

from enum import Enum


class CoordinatorState(str, Enum):
    """Lifecycle of a single match run."""
    IDLE = "IDLE"
    PREPARING = "PREPARING"
    STREAMING = "STREAMING"
    MATCHED = "MATCHED"
    EXHAUSTED = "EXHAUSTED"
    ERROR = "ERROR"
    DONE = "DONE"
