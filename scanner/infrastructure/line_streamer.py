"""Lazy line streaming over wordlist files."""

import logging
from typing import Iterable, Iterator
from shared.domain.consts import LineTerminator
from shared.domain.models import LineRef, LineCountPayload
from shared.exceptions import LineCountError

logger = logging.getLogger(__name__)

# Undecodable bytes map to lone surrogates and back, so hashing sees the raw bytes
WORDLIST_ENCODING = "utf-8"
WORDLIST_ERRORS = "surrogateescape"


def _strip_terminator(line: str) -> str:
    """Strip one trailing "\\n" and one "\\r" before it, nothing else."""
    if line.endswith(LineTerminator.LF):
        line = line[:-1]
    if line.endswith(LineTerminator.CR):
        line = line[:-1]
    return line


def numbered_lines_from_files(paths: Iterable[str]) -> Iterator[LineRef]:
    """
    Yield every line of every file, in file order then line order.

    Files that cannot be opened are skipped with a warning; a missing
    wordlist never aborts the scan. Nothing is read ahead: each file is
    open only while its lines are being consumed.

    Yields:
        LineRef with the source path, 1-based line number, and the
        line text without its terminator.
    """
    for path in paths:
        try:
            f = open(path, "r", encoding=WORDLIST_ENCODING, errors=WORDLIST_ERRORS, newline=LineTerminator.LF)
        except OSError as e:
            logger.warning(f"Skipping wordlist {path}: {e}")
            continue

        with f:
            line_number = 0
            try:
                for line in f:
                    line_number += 1
                    yield LineRef(path=path, line_number=line_number, text=_strip_terminator(line))
            except OSError as e:
                logger.warning(f"Stopped reading wordlist {path} after line {line_number}: {e}")


def lines_from_files(paths: Iterable[str]) -> Iterator[str]:
    """Yield the text of every line of every file (see numbered_lines_from_files)."""
    for ref in numbered_lines_from_files(paths):
        yield ref.text


def count_lines(path: str) -> int:
    """
    Count the lines in a single file without keeping them.

    A final line without a terminator still counts; an empty file has 0 lines.

    Raises:
        LineCountError: If the file cannot be opened or read.
    """
    count = 0
    try:
        with open(path, "rb") as f:
            for _ in f:
                count += 1
    except OSError as e:
        raise LineCountError(path, str(e)) from e
    return count


def count_lines_result(path: str) -> LineCountPayload:
    """
    Count lines, returning the failure as a value instead of raising.

    Returns:
        LineCountPayload with count, or count 0 and the error message.
    """
    try:
        return LineCountPayload(path=path, count=count_lines(path))
    except LineCountError as e:
        logger.warning(str(e))
        return LineCountPayload(path=path, count=0, error=str(e))
