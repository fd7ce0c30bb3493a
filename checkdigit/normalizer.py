from __future__ import annotations

from typing import Iterable, List, Optional

ASCII_DIGITS = frozenset("0123456789")


def normalize(text: Optional[str]) -> List[int]:
    """Return the ASCII decimal digits of ``text`` as integers, in order.

    Every other character (hyphens, spaces, ``X``, non-ASCII digits) is
    dropped. Never raises; ``None`` and ``""`` give an empty list.
    """
    if not text:
        return []
    return [ord(ch) - ord("0") for ch in text if ch in ASCII_DIGITS]


def digits_to_string(digits: Iterable[int]) -> str:
    return "".join(str(d) for d in digits)
