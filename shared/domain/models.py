"""Domain models for candidates, digests, and payloads."""

from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from shared.domain.consts import ResultStatusLiteral


@dataclass(frozen=True)
class LineRef:
    """Where a wordlist candidate came from."""
    path: str
    line_number: int  # 1-based
    text: str


@dataclass
class WorkItem:
    """Candidate bytes queued for hashing."""
    data: bytes
    source: Optional[LineRef] = None


@dataclass
class DigestRecord:
    """One digest produced by one worker for one (candidate, algorithm) pair."""
    digest: bytes
    algorithm: str
    source: Optional[LineRef] = None


class MatchResultPayload(BaseModel):
    """Outcome of a match run."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "MATCHED",
                "matched": True,
                "source_file": "/usr/share/dict/rockyou.txt",
                "line_number": 42,
                "matched_line": "password123",
                "algorithm": "sha256",
                "candidates_submitted": 168,
                "error_message": None,
            }
        }
    )

    status: ResultStatusLiteral = Field(
        ...,
        description="Result status: MATCHED, NOT_FOUND, or ERROR",
    )
    matched: bool = Field(False, description="True only when status is MATCHED")
    source_file: Optional[str] = Field(None, description="Wordlist that produced the match")
    line_number: Optional[int] = Field(None, ge=1, description="1-based line number of the match")
    matched_line: Optional[str] = Field(None, description="Wordlist line that produced the match")
    algorithm: Optional[str] = Field(None, description="Algorithm whose digest matched")
    candidates_submitted: int = Field(0, ge=0, description="Candidate variants queued for hashing")
    error_message: Optional[str] = Field(None, description="Error message if status is ERROR")


class LineCountPayload(BaseModel):
    """Line count of one wordlist, or the reason it could not be read."""
    path: str
    count: int = Field(0, ge=0)
    error: Optional[str] = None
