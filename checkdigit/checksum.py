from __future__ import annotations

import logging
import re
from typing import List, Optional, Union

from checkdigit.exceptions import CheckDigitMismatchError, EmptyInputError, InsufficientInputError
from checkdigit.normalizer import normalize

logger = logging.getLogger(__name__)

ISBN10_PAYLOAD = 9
ISBN13_PAYLOAD = 12

# Trailing "X" check character, allowing separators or punctuation after it (e.g. "0-8044-2957-X.")
_TRAILING_X = re.compile(r"(?<![A-Za-z])[Xx][^0-9A-Za-z]*$")

CheckDigit10 = Union[int, str]


def _require_digits(digits: List[int], required: int, kind: str) -> None:
    if not digits:
        raise EmptyInputError(required, kind)
    if len(digits) < required:
        raise InsufficientInputError(required, len(digits), kind)


def _supplied_check(text: str, digits: List[int], payload: int, allow_x: bool) -> Optional[str]:
    """Check character already present in ``text`` after the payload, if any."""
    if len(digits) > payload:
        return str(digits[payload])
    if allow_x and len(digits) == payload and _TRAILING_X.search(text or ""):
        return "X"
    return None


def checksum10(text: str, strict: bool = False) -> CheckDigit10:
    """Compute the ISBN-10 check digit of ``text``.

    Only the first nine digits are weighted (10 down to 2); anything after
    them, such as an existing check digit, is ignored unless ``strict`` is
    set, in which case a supplied check character must match.

    Returns an int in 0..9, or ``"X"`` for a check value of 10.
    """
    digits = normalize(text)
    _require_digits(digits, ISBN10_PAYLOAD, "ISBN-10")

    total = sum(d * (10 - i) for i, d in enumerate(digits[:ISBN10_PAYLOAD]))
    value = (11 - total % 11) % 11
    result: CheckDigit10 = "X" if value == 10 else value
    logger.debug(f"ISBN-10 payload={digits[:ISBN10_PAYLOAD]} sum={total} check={result}")

    if strict:
        supplied = _supplied_check(text, digits, ISBN10_PAYLOAD, allow_x=True)
        if supplied is not None and supplied != str(result):
            logger.warning(f"ISBN-10 check digit mismatch: expected {result}, got {supplied}")
            raise CheckDigitMismatchError(str(result), supplied, "ISBN-10")
    return result


def checksum13(text: str, strict: bool = False) -> int:
    """Compute the ISBN-13 (EAN-13) check digit of ``text``.

    Weights alternate 1, 3 over the first twelve digits.
    """
    digits = normalize(text)
    _require_digits(digits, ISBN13_PAYLOAD, "ISBN-13")

    total = 0
    for i, d in enumerate(digits[:ISBN13_PAYLOAD]):
        total += d if i % 2 == 0 else d * 3
    result = (10 - total % 10) % 10
    logger.debug(f"ISBN-13 payload={digits[:ISBN13_PAYLOAD]} sum={total} check={result}")

    if strict:
        supplied = _supplied_check(text, digits, ISBN13_PAYLOAD, allow_x=False)
        if supplied is not None and supplied != str(result):
            logger.warning(f"ISBN-13 check digit mismatch: expected {result}, got {supplied}")
            raise CheckDigitMismatchError(str(result), supplied, "ISBN-13")
    return result
