from __future__ import annotations


class ChecksumError(ValueError):
    """Base error for check digit computation."""


class InsufficientInputError(ChecksumError):
    """Raised when fewer digits than the algorithm needs are present."""

    def __init__(self, required: int, found: int, kind: str = "ISBN") -> None:
        self.required = required
        self.found = found
        self.kind = kind
        super().__init__(f"{kind} check digit needs at least {required} digits, found {found}.")


class EmptyInputError(InsufficientInputError):
    """Raised when the input contains no digits at all."""

    def __init__(self, required: int, kind: str = "ISBN") -> None:
        super().__init__(required, 0, kind)
        self.args = (f"{kind} check digit needs at least {required} digits, input has none.",)


class CheckDigitMismatchError(ChecksumError):
    """Raised in strict mode when the supplied check digit is wrong."""

    def __init__(self, expected: str, actual: str, kind: str = "ISBN") -> None:
        self.expected = expected
        self.actual = actual
        self.kind = kind
        super().__init__(f"{kind} check digit mismatch: expected {expected}, got {actual}.")
