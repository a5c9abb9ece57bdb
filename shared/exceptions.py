"""
Exceptions for the wordlist matcher.

Missing wordlists are not errors here; these cover the cases where a
check could not run at all.
"""


class HashCheckError(Exception):
    """Base exception: the check could not produce a verdict."""
    pass


class UnknownAlgorithmError(HashCheckError, ValueError):
    """Raised when a hash algorithm identifier is not registered."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"Unknown hash algorithm: {algorithm}")


class LineCountError(HashCheckError):
    """Raised when a wordlist cannot be opened or read while counting lines."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot count lines in {path}: {reason}")


class HasherFailureError(HashCheckError):
    """Raised when a worker's hasher fails on candidate input."""

    def __init__(self, algorithm: str, reason: str):
        self.algorithm = algorithm
        self.reason = reason
        super().__init__(f"Hasher {algorithm} failed: {reason}")
