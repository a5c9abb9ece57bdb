"""Text normalization helpers."""

from shared.text.normalizer import (
    count_unique_chars,
    count_systematic_chars,
    reverse,
    normalize,
    variants,
)

__all__ = [
    "count_unique_chars",
    "count_systematic_chars",
    "reverse",
    "normalize",
    "variants",
]
