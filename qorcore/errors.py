"""Structured error codes and the base error type.

Error codes are laid out as follows (bytes of a 64 bit number):

| Byte 7  | Byte 6 | Byte 5     | Byte 4   | Bytes 3..0   |
| ------- | ------ | ---------- | -------- | ------------ |
| Library | Module | Sub-module | Reserved | Error Number |
"""

from __future__ import annotations

ErrorCode = int

OK: ErrorCode = 0x00000000

# Foundation library modules
CORE: ErrorCode = 0x10000000
OS: ErrorCode = 0x10100000
MEM: ErrorCode = 0x10200000
RTO: ErrorCode = 0x10300000
COM: ErrorCode = 0x10400000
NEXUS: ErrorCode = 0x10500000

# System services and user applications live outside this library
SYS: ErrorCode = 0x20000000
USER: ErrorCode = 0x80000000

NOT_IMPLEMENTED: ErrorCode = CORE + 1
DIVISION_BY_ZERO: ErrorCode = CORE + 10
ARITHMETIC_UNDERFLOW: ErrorCode = CORE + 11
ARITHMETIC_OVERFLOW: ErrorCode = CORE + 12
UNSUPPORTED_FEATURE: ErrorCode = CORE + 100
INVALID_ID: ErrorCode = CORE + 1000
INVALID_TAG: ErrorCode = CORE + 1001
LOCK_ERROR: ErrorCode = CORE + 1100
COLLECTION_FULL: ErrorCode = CORE + 1200
COLLECTION_EMPTY: ErrorCode = CORE + 1201
PARSE_ERROR: ErrorCode = CORE + 2000

# Operating system sub-modules
OS_MEM: ErrorCode = OS + 0x1000
OS_THREAD: ErrorCode = OS + 0x2000
OS_FILESYSTEM: ErrorCode = OS + 0x3000

ALLOCATION_FAILURE: ErrorCode = OS_MEM + 1


class QorError(Exception):
    """An error carrying a structured error code and an optional text."""

    def __init__(self, code: ErrorCode, text: str | None = None) -> None:
        super().__init__(code, text)
        self.code = code
        self._text = text

    @classmethod
    def from_code(cls, code: ErrorCode) -> QorError:
        """Create an error that has a code but no text."""
        return cls(code, None)

    @classmethod
    def not_implemented(cls) -> QorError:
        """The error reported by functions that are not implemented."""
        return cls(NOT_IMPLEMENTED, "Function not implemented.")

    @property
    def text(self) -> str:
        """The error text, or an empty string when there is none."""
        return self._text if self._text is not None else ""

    def __str__(self) -> str:
        shown = self._text if self._text is not None else "n/a"
        return f"{self.code}: {shown}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QorError):
            return NotImplemented
        return self.code == other.code and self._text == other._text

    def __hash__(self) -> int:
        return hash((self.code, self._text))