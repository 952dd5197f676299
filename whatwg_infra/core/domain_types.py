"""Domain Types — rich types and fixed ranges shared by every primitive.

Invariants:
    - CodePoint is 0x0000–0x10FFFF
    - Range constants are inclusive on both ends

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, plain ints flow through
    - Whitespace and newline sets as str: usable directly with str.strip / str.translate
"""

from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

CodePoint = NewType("CodePoint", int)       # 0x0000–0x10FFFF


# ─── Ranges ──────────────────────────────────────────────────────

MAX_CODE_POINT = 0x10FFFF
MAX_ASCII = 0x7F

SURROGATE_RANGE = (0xD800, 0xDFFF)
LEADING_SURROGATE_RANGE = (0xD800, 0xDBFF)
TRAILING_SURROGATE_RANGE = (0xDC00, 0xDFFF)

ASCII_UPPER_ALPHA_RANGE = (0x41, 0x5A)
ASCII_LOWER_ALPHA_RANGE = (0x61, 0x7A)
ASCII_DIGIT_RANGE = (0x30, 0x39)


# ─── Code Point Sets ─────────────────────────────────────────────

ASCII_WHITESPACE = "\t\n\x0c\r "
ASCII_TAB_OR_NEWLINE = "\t\n\r"
NEWLINES = "\n\r"
