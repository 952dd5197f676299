"""Whitespace — ASCII whitespace trimming/collapsing and newline normalization.

Invariants:
    - Only the five ASCII whitespace code points are ever removed; U+000B,
      U+00A0 and other Unicode spaces are content
    - strip_leading_trailing_whitespace is idempotent
    - strip_collapse_whitespace output has no leading/trailing whitespace
      and never two consecutive U+0020

Design Decisions:
    - str.strip(chars) with the explicit ASCII set: the no-argument form
      strips Unicode whitespace
"""

import re

from whatwg_infra.core.domain_types import ASCII_WHITESPACE, NEWLINES

_ASCII_WHITESPACE_RUN = re.compile(f"[{re.escape(ASCII_WHITESPACE)}]+")
_STRIP_NEWLINES = str.maketrans("", "", NEWLINES)


def strip_leading_trailing_whitespace(s: str) -> str:
    """Remove ASCII whitespace from the start and end; interior is preserved."""
    return s.strip(ASCII_WHITESPACE)


def strip_collapse_whitespace(s: str) -> str:
    """Trim ends, then replace every run of ASCII whitespace with one U+0020.

    "  a\\tb\\n\\n c  " -> "a b c"
    """
    return _ASCII_WHITESPACE_RUN.sub(" ", strip_leading_trailing_whitespace(s))


def normalize_newlines(s: str) -> str:
    """Replace every CR LF pair with LF, then every remaining CR with LF."""
    return s.replace("\r\n", "\n").replace("\r", "\n")


def strip_newlines(s: str) -> str:
    """Remove every U+000A LF and U+000D CR."""
    return s.translate(_STRIP_NEWLINES)
