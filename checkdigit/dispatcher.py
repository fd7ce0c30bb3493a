from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Union

from checkdigit.checksum import checksum10, checksum13
from checkdigit.exceptions import ChecksumError
from checkdigit.normalizer import digits_to_string, normalize

logger = logging.getLogger(__name__)

# More digits than this means the text is treated as an ISBN-13
ISBN13_THRESHOLD = 10

# Digit groups joined by hyphens, optionally closed by an X check character
_GROUP_PATTERN = re.compile(r"[0-9]+(?:-+[0-9]+)*(?:-?[Xx]\b)?")

# Space-separated groups only form a token when they add up to a whole ISBN
ISBN_LENGTHS = (13, 10)


@dataclass
class CheckResult:
    """Outcome of routing a raw string to one of the checksum algorithms."""
    kind: str
    digits: str
    check_digit: Union[int, str]

    @property
    def display(self) -> str:
        return str(self.check_digit)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "digits": self.digits,
            "check_digit": self.display,
        }


def check(raw_text: str, strict: bool = False) -> CheckResult:
    """Route ``raw_text`` by digit count and compute its check digit."""
    digits = normalize(raw_text)
    if len(digits) > ISBN13_THRESHOLD:
        logger.debug(f"{len(digits)} digits, routing to ISBN-13")
        return CheckResult("ISBN-13", digits_to_string(digits), checksum13(raw_text, strict=strict))
    logger.debug(f"{len(digits)} digits, routing to ISBN-10")
    return CheckResult("ISBN-10", digits_to_string(digits), checksum10(raw_text, strict=strict))


def verify_at_point(raw_text: str, strict: bool = False) -> Union[int, str]:
    """Check digit for the identifier in ``raw_text``.

    Errors from the checksum functions propagate so the caller can report
    them instead of a number.
    """
    return check(raw_text, strict=strict).check_digit


def verify_with(supplier: Callable[[], str], consumer: Callable[[str], Any], strict: bool = False) -> Union[int, str]:
    """Pull text from ``supplier``, hand the rendered result to ``consumer``.

    On failure the consumer gets an ``Error: ...`` message and the error is
    re-raised.
    """
    raw_text = supplier()
    try:
        result = verify_at_point(raw_text, strict=strict)
    except ChecksumError as e:
        logger.info(f"Verification failed for {raw_text!r}: {e}")
        consumer(f"Error: {e}")
        raise
    consumer(str(result))
    return result


def token_at_point(text: str, position: int) -> str:
    """Return the ISBN-like token under ``position`` in ``text``.

    Hyphenated groups always belong together. Plain digit groups separated
    by single spaces (``978 1 61262 294 1``) are joined only when the run
    around the cursor holds exactly 10 or 13 ISBN characters, so a stray
    number such as the ``13`` of ``ISBN-13`` is never absorbed.

    A cursor placed right after a token (on the following character, or at
    the end of the text) still selects it. Returns ``""`` when there is none.
    """
    if not text:
        return ""
    position = max(0, min(position, len(text)))

    groups = list(_GROUP_PATTERN.finditer(text))
    current = None
    for i, match in enumerate(groups):
        if match.start() <= position < match.end():
            current = i
            break
        if match.end() == position:
            current = i
        elif match.start() > position:
            break
    if current is None:
        return ""

    group = groups[current].group(0)
    if "-" in group or _isbn_length(group) in ISBN_LENGTHS:
        return group

    # Chain of plain groups around the cursor, each separated by one space
    first = last = current
    while first > 0 and _joinable(text, groups[first - 1], groups[first]):
        first -= 1
    while last < len(groups) - 1 and _joinable(text, groups[last], groups[last + 1]):
        last += 1

    best = None
    for start in range(first, current + 1):
        for end in range(current, last + 1):
            length = sum(_isbn_length(m.group(0)) for m in groups[start:end + 1])
            if length not in ISBN_LENGTHS:
                continue
            if best is None or length > best[0]:
                best = (length, start, end)
    if best is None:
        return group
    _, start, end = best
    return text[groups[start].start():groups[end].end()]


def _isbn_length(group: str) -> int:
    return sum(1 for ch in group if ch.isdigit() or ch in "Xx")


def _joinable(text: str, left: re.Match, right: re.Match) -> bool:
    if "-" in left.group(0) or "-" in right.group(0):
        return False
    return text[left.end():right.start()] == " "


def verify_text_at(text: str, position: int, strict: bool = False) -> Union[int, str]:
    """Extract the token at ``position`` and compute its check digit."""
    token = token_at_point(text, position)
    logger.debug(f"Token at {position}: {token!r}")
    return verify_at_point(token, strict=strict)
