"""Tests for domain models."""

import pytest
from pydantic import ValidationError
from shared.domain.models import (
    LineRef,
    WorkItem,
    DigestRecord,
    MatchResultPayload,
    LineCountPayload,
)
from shared.domain.consts import ResultStatus


class TestMatchResultPayload:
    """Tests for MatchResultPayload."""
    
    def test_matched_payload(self):
        """Test a full MATCHED payload."""
        payload = MatchResultPayload(
            status=ResultStatus.MATCHED,
            matched=True,
            source_file="words.txt",
            line_number=3,
            matched_line="abc",
            algorithm="md5",
            candidates_submitted=5,
        )
        assert payload.status == ResultStatus.MATCHED
        assert payload.line_number == 3
    
    def test_invalid_status_rejected(self):
        """Test that unknown statuses are rejected."""
        with pytest.raises(ValidationError):
            MatchResultPayload(status="MAYBE")
    
    def test_line_number_is_one_based(self):
        """Test that line 0 is rejected."""
        with pytest.raises(ValidationError):
            MatchResultPayload(status=ResultStatus.MATCHED, line_number=0)
    
    def test_negative_candidates_rejected(self):
        """Test that candidates_submitted cannot be negative."""
        with pytest.raises(ValidationError):
            MatchResultPayload(status=ResultStatus.NOT_FOUND, candidates_submitted=-1)


class TestRecords:
    """Tests for internal dataclasses."""
    
    def test_line_ref_is_hashable_and_frozen(self):
        """Test that LineRef can be compared and not mutated."""
        ref = LineRef(path="a.txt", line_number=1, text="x")
        assert ref == LineRef(path="a.txt", line_number=1, text="x")
        with pytest.raises(AttributeError):
            ref.text = "y"
    
    def test_work_item_default_source(self):
        """Test that WorkItem source defaults to None."""
        assert WorkItem(data=b"x").source is None
    
    def test_digest_record(self):
        """Test DigestRecord fields."""
        record = DigestRecord(digest=b"\x00" * 16, algorithm="md5")
        assert record.source is None
        assert len(record.digest) == 16
    
    def test_line_count_payload(self):
        """Test LineCountPayload defaults."""
        payload = LineCountPayload(path="a.txt")
        assert payload.count == 0
        assert payload.error is None
