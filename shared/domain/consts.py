"""Constants to avoid string typos and magic numbers."""

from enum import Enum
from typing import Literal


class ResultStatus(str, Enum):
    """Result status constants."""
    MATCHED = "MATCHED"
    NOT_FOUND = "NOT_FOUND"
    ERROR = "ERROR"


# Type alias for result status literals
ResultStatusLiteral = Literal["MATCHED", "NOT_FOUND", "ERROR"]


class HashAlgorithm(str, Enum):
    """Hash algorithm identifiers (hashlib names)."""
    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_256 = "sha3_256"
    SHA3_512 = "sha3_512"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"


class DigestDisplay:
    """Constants for digest display."""
    PREFIX_LENGTH = 8  # Number of hex characters to show in logs (e.g., "482c811d...")


class LineTerminator:
    """Line terminators stripped from wordlist lines."""
    LF = "\n"
    CR = "\r"
