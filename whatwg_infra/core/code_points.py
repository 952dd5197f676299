"""Code Points — classification predicates over single code points.

Invariants:
    - Every predicate accepts an int or a one-character str
    - Predicates are total over ints: out-of-range values fail the range test
    - A str of any other length raises InvalidCodePointError
    - U+000B (vertical tab) is NOT ASCII whitespace

Design Decisions:
    - Range tests on the integer value, never str.isspace/isalpha/isdigit:
      those follow Unicode categories, the Infra definitions are ASCII-only
    - as_code_point validates with a pydantic TypeAdapter (strict int, 0–0x10FFFF)
"""

import logging
from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from whatwg_infra.core.domain_types import (
    ASCII_DIGIT_RANGE,
    ASCII_LOWER_ALPHA_RANGE,
    ASCII_TAB_OR_NEWLINE,
    ASCII_UPPER_ALPHA_RANGE,
    ASCII_WHITESPACE,
    LEADING_SURROGATE_RANGE,
    MAX_ASCII,
    MAX_CODE_POINT,
    SURROGATE_RANGE,
    TRAILING_SURROGATE_RANGE,
    CodePoint,
)
from whatwg_infra.core.errors import InvalidCodePointError

logger = logging.getLogger(__name__)

_CODE_POINT_ADAPTER = TypeAdapter(
    Annotated[int, Field(strict=True, ge=0, le=MAX_CODE_POINT)],
)

_ASCII_WHITESPACE_VALUES = frozenset(ord(c) for c in ASCII_WHITESPACE)
_ASCII_TAB_OR_NEWLINE_VALUES = frozenset(ord(c) for c in ASCII_TAB_OR_NEWLINE)


def _log_rejection() -> None:
    logger.debug("Rejected code point", extra={"error_code": "INVALID_CODE_POINT"})


def _value(c: int | str) -> int:
    """Integer value of a code point given as int or one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            _log_rejection()
            raise InvalidCodePointError(c, f"expected 1 character, got {len(c)}")
        return ord(c)
    if isinstance(c, int):
        return c
    _log_rejection()
    raise InvalidCodePointError(c, f"expected int or str, got {type(c).__name__}")


def _in_range(value: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= value <= bounds[1]


# === Boundary =================================================================

def as_code_point(value: int | str) -> CodePoint:
    """Convert an int or one-character str into a validated CodePoint.

    Raises InvalidCodePointError for wrong types, wrong-length strings,
    and integers outside 0x0000–0x10FFFF.
    """
    if isinstance(value, str):
        return CodePoint(_value(value))
    try:
        return CodePoint(_CODE_POINT_ADAPTER.validate_python(value))
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        _log_rejection()
        raise InvalidCodePointError(value, reason) from exc


def format_code_point(c: int | str) -> str:
    """Render as "U+" and at least four upper-case hex digits (U+0041, U+1F600)."""
    return f"U+{as_code_point(c):04X}"


# === Surrogates, scalar values, noncharacters =================================

def is_surrogate(c: int | str) -> bool:
    return _in_range(_value(c), SURROGATE_RANGE)


def is_leading_surrogate(c: int | str) -> bool:
    return _in_range(_value(c), LEADING_SURROGATE_RANGE)


def is_trailing_surrogate(c: int | str) -> bool:
    return _in_range(_value(c), TRAILING_SURROGATE_RANGE)


def is_scalar_value(c: int | str) -> bool:
    """A code point that is not a surrogate."""
    value = _value(c)
    return 0 <= value <= MAX_CODE_POINT and not is_surrogate(value)


def is_noncharacter(c: int | str) -> bool:
    """U+FDD0–U+FDEF, or U+xFFFE / U+xFFFF in any of the 17 planes."""
    value = _value(c)
    if 0xFDD0 <= value <= 0xFDEF:
        return True
    return 0 <= value <= MAX_CODE_POINT and (value & 0xFFFE) == 0xFFFE


# === ASCII ====================================================================

def is_ascii_byte(b: int | str) -> bool:
    """0x00 ≤ b ≤ 0x7F."""
    return 0 <= _value(b) <= MAX_ASCII


def is_ascii_code_point(c: int | str) -> bool:
    return 0 <= _value(c) <= MAX_ASCII


def is_ascii_tab_or_newline(c: int | str) -> bool:
    """U+0009 TAB, U+000A LF, or U+000D CR."""
    return _value(c) in _ASCII_TAB_OR_NEWLINE_VALUES


def is_ascii_whitespace(c: int | str) -> bool:
    """U+0009 TAB, U+000A LF, U+000C FF, U+000D CR, or U+0020 SPACE."""
    return _value(c) in _ASCII_WHITESPACE_VALUES


def is_c0_control(c: int | str) -> bool:
    """U+0000 NULL to U+001F INFORMATION SEPARATOR ONE.

    Unlike a general "ASCII control" test, U+007F DELETE is excluded.
    """
    return 0 <= _value(c) <= 0x1F


def is_c0_control_or_space(c: int | str) -> bool:
    return 0 <= _value(c) <= 0x20


def is_control(c: int | str) -> bool:
    """C0 control, or U+007F DELETE to U+009F APPLICATION PROGRAM COMMAND."""
    value = _value(c)
    return is_c0_control(value) or 0x7F <= value <= 0x9F


def is_ascii_digit(c: int | str) -> bool:
    return _in_range(_value(c), ASCII_DIGIT_RANGE)


def is_ascii_upper_hex_digit(c: int | str) -> bool:
    """ASCII digit or U+0041 (A) to U+0046 (F)."""
    value = _value(c)
    return is_ascii_digit(value) or 0x41 <= value <= 0x46


def is_ascii_lower_hex_digit(c: int | str) -> bool:
    """ASCII digit or U+0061 (a) to U+0066 (f)."""
    value = _value(c)
    return is_ascii_digit(value) or 0x61 <= value <= 0x66


def is_ascii_hex_digit(c: int | str) -> bool:
    value = _value(c)
    return is_ascii_upper_hex_digit(value) or is_ascii_lower_hex_digit(value)


def is_ascii_upper_alpha(c: int | str) -> bool:
    return _in_range(_value(c), ASCII_UPPER_ALPHA_RANGE)


def is_ascii_lower_alpha(c: int | str) -> bool:
    return _in_range(_value(c), ASCII_LOWER_ALPHA_RANGE)


def is_ascii_alpha(c: int | str) -> bool:
    value = _value(c)
    return is_ascii_upper_alpha(value) or is_ascii_lower_alpha(value)


def is_ascii_alphanumeric(c: int | str) -> bool:
    value = _value(c)
    return is_ascii_digit(value) or is_ascii_alpha(value)
