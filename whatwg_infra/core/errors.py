"""Error Hierarchy — typed, categorized exceptions for boundary rejections.

Invariants:
    - Every error has a code (str) and a category (ErrorCategory)
    - Primitives are total over valid input; errors only surface at boundary
      conversions (as_code_point, encoders, position arguments)
    - to_dict() produces a serializable envelope for host applications

Design Decisions:
    - Single hierarchy with InfraError base: callers catch one type
    - Encoding errors chain the underlying UnicodeError (raise ... from exc)
"""

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    ENCODING = "encoding"


class InfraError(Exception):
    """Base exception for all whatwg_infra errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to a plain error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "details": dict(self.details),
            }
        }


# ─── Validation Errors ──────────────────────────────────────────

class InvalidCodePointError(InfraError):
    """Value cannot be interpreted as a single code point."""
    def __init__(self, value: Any, reason: str):
        super().__init__(
            f"Invalid code point {value!r}: {reason}",
            "INVALID_CODE_POINT", ErrorCategory.VALIDATION,
            {"value": repr(value), "reason": reason},
        )
        self.value = value


class InvalidPositionError(InfraError):
    """Position variable points before the start of the input."""
    def __init__(self, position: int):
        super().__init__(
            f"Position must be non-negative, got {position}",
            "INVALID_POSITION", ErrorCategory.VALIDATION,
            {"position": position},
        )
        self.position = position


# ─── Encoding Errors ────────────────────────────────────────────

class NonIsomorphicStringError(InfraError):
    """String holds a code point above U+00FF and cannot be isomorphic encoded."""
    def __init__(self, code_point: int, index: int):
        super().__init__(
            f"Code point U+{code_point:04X} at index {index} is above U+00FF",
            "NON_ISOMORPHIC_STRING", ErrorCategory.ENCODING,
            {"code_point": code_point, "index": index},
        )
        self.code_point = code_point
        self.index = index


class NotASCIIError(InfraError):
    """String or byte sequence holds a value above 0x7F."""
    def __init__(self, value: int, index: int):
        super().__init__(
            f"Value 0x{value:02X} at index {index} is not ASCII",
            "NOT_ASCII", ErrorCategory.ENCODING,
            {"value": value, "index": index},
        )
        self.value = value
        self.index = index
