"""Domain models and entities."""

from shared.domain.models import (
    LineRef,
    WorkItem,
    DigestRecord,
    MatchResultPayload,
    LineCountPayload,
)
from shared.domain.status import CoordinatorState
from shared.domain.consts import (
    ResultStatus,
    ResultStatusLiteral,
    HashAlgorithm,
    DigestDisplay,
    LineTerminator,
)

__all__ = [
    "LineRef",
    "WorkItem",
    "DigestRecord",
    "MatchResultPayload",
    "LineCountPayload",
    "CoordinatorState",
    "ResultStatus",
    "ResultStatusLiteral",
    "HashAlgorithm",
    "DigestDisplay",
    "LineTerminator",
]
