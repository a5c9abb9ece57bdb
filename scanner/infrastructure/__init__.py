"""Scanner infrastructure layer."""

from scanner.infrastructure.cancellation import CancellationToken
from scanner.infrastructure.line_streamer import (
    lines_from_files,
    numbered_lines_from_files,
    count_lines,
    count_lines_result,
)

__all__ = [
    "CancellationToken",
    "lines_from_files",
    "numbered_lines_from_files",
    "count_lines",
    "count_lines_result",
]
