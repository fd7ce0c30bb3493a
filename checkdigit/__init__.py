"""ISBN Check Digit - Core Package

This package contains the pure computation modules:
- Digit normalization (normalizer.py)
- ISBN-10 / ISBN-13 check digit algorithms (checksum.py)
- Routing and cursor-token extraction for interactive hosts (dispatcher.py)
- Error types (exceptions.py)
"""

from checkdigit.exceptions import (
    ChecksumError,
    InsufficientInputError,
    EmptyInputError,
    CheckDigitMismatchError,
)
from checkdigit.normalizer import normalize, digits_to_string
from checkdigit.checksum import checksum10, checksum13
from checkdigit.dispatcher import (
    CheckResult,
    check,
    verify_at_point,
    verify_with,
    token_at_point,
    verify_text_at,
)

__all__ = [
    "ChecksumError",
    "InsufficientInputError",
    "EmptyInputError",
    "CheckDigitMismatchError",
    "normalize",
    "digits_to_string",
    "checksum10",
    "checksum13",
    "CheckResult",
    "check",
    "verify_at_point",
    "verify_with",
    "token_at_point",
    "verify_text_at",
]
