"""Canonical comparison forms of passwords and wordlist lines.

All functions are pure and operate on code points, not bytes.
"""


# str.isspace() also accepts the ASCII separators \x1c-\x1f; they are content here
_NON_TRIM_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _lower_char(c: str) -> str:
    """Lowercase one code point into one code point ("İ" -> "i")."""
    return c.lower()[:1]


def _is_trim_space(c: str) -> bool:
    return c.isspace() and c not in _NON_TRIM_SEPARATORS


def count_unique_chars(s: str) -> int:
    """Return the number of distinct characters in s, ignoring case."""
    return len({_lower_char(c) for c in s})


def count_systematic_chars(s: str) -> int:
    """
    Return how many characters continue an ascending or descending run.

    Position i counts when its code point is exactly one above or below
    the previous one ("abcdef" -> 5, "654321" -> 5). No wraparound.
    """
    return sum(
        1
        for prev, cur in zip(s, s[1:])
        if abs(ord(cur) - ord(prev)) == 1
    )


def reverse(s: str) -> str:
    """Return s with its code points in reverse order."""
    return s[::-1]


def normalize(s: str) -> str:
    """Return s trimmed of surrounding whitespace and lowercased."""
    start, end = 0, len(s)
    while start < end and _is_trim_space(s[start]):
        start += 1
    while end > start and _is_trim_space(s[end - 1]):
        end -= 1
    return "".join(_lower_char(c) for c in s[start:end])


def variants(s: str) -> frozenset[str]:
    """
    Return the variant set of s.

    Variants: original, normalized, reversed, reversed and normalized.
    Duplicates collapse, so "abba" yields a single variant.
    """
    reversed_s = reverse(s)
    return frozenset((s, normalize(s), reversed_s, normalize(reversed_s)))
