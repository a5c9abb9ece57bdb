"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def make_wordlist(tmp_path):
    """
    Write a wordlist file and return its path as a string.
    
    Lines are joined with "\\n" and written as UTF-8; pass raw=bytes
    to control the exact file content.
    """
    def _make(name: str = "words.txt", lines=None, raw: bytes = None) -> str:
        path = tmp_path / name
        if raw is not None:
            path.write_bytes(raw)
        else:
            content = "\n".join(lines or [])
            if lines:
                content += "\n"
            path.write_text(content, encoding="utf-8")
        return str(path)
    
    return _make


@pytest.fixture
def missing_path(tmp_path):
    """Path of a wordlist that does not exist."""
    return str(tmp_path / "does-not-exist.txt")
