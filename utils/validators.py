import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from checkdigit.checksum import checksum10, checksum13
from checkdigit.exceptions import ChecksumError, InsufficientInputError


@dataclass
class ValidationResult:
    isbn: str
    kind: str
    expected: str
    actual: str

    @property
    def valid(self) -> bool:
        return self.expected == self.actual

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["valid"] = self.valid
        return data


class ISBNValidator:
    """ISBN-10 / ISBN-13 validator built on the check digit algorithms.
    Unlike the checksum functions it requires a complete identifier.
    """

    @staticmethod
    def normalize_isbn(raw: Optional[str]) -> str:
        if raw is None:
            return ""
        s = re.sub(r"[^0-9Xx]", "", raw)
        return s.upper()

    @staticmethod
    def validate(raw: Optional[str]) -> ValidationResult:
        s = ISBNValidator.normalize_isbn(raw)
        if len(s) == 10 and s[:-1].isdigit():
            return ValidationResult(s, "ISBN-10", str(checksum10(s[:-1])), s[-1])
        if len(s) == 13 and s.isdigit():
            return ValidationResult(s, "ISBN-13", str(checksum13(s[:-1])), s[-1])
        if len(s) < 10:
            raise InsufficientInputError(10, sum(ch.isdigit() for ch in s), "ISBN")
        raise ChecksumError(f"Not a well-formed ISBN-10 or ISBN-13: {s}")

    @staticmethod
    def is_valid_isbn(isbn: Optional[str]) -> bool:
        if not isbn:
            return False
        try:
            return ISBNValidator.validate(isbn).valid
        except ChecksumError:
            return False
