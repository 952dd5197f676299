"""Strings — ASCII case conversion, matching, encoding bridges and code unit ordering.

Invariants:
    - Case conversion touches only A–Z / a–z; non-ASCII code points pass through
      unchanged (U+0130, U+017F, U+212A are never folded)
    - isomorphic_encode(isomorphic_decode(b)) == b for every byte sequence
    - Code unit functions compare UTF-16 code units, not code points

Design Decisions:
    - str.translate with fixed ASCII tables over str.lower()/upper(): the
      builtins apply full Unicode case mapping
    - latin-1 codec for isomorphic encode/decode: it maps 0x00–0xFF one-to-one
    - utf-16-be with surrogatepass for code units: lone surrogates stay one unit,
      and big-endian byte order preserves code unit ordering
"""

import logging
import string
from collections.abc import Iterable

from whatwg_infra.core.byte_sequences import BytesLike, is_ascii_byte_sequence
from whatwg_infra.core.errors import NonIsomorphicStringError, NotASCIIError

logger = logging.getLogger(__name__)

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


# === Case =====================================================================

def to_ascii_lowercase(s: str) -> str:
    """Replace each ASCII upper alpha with its ASCII lower alpha counterpart."""
    return s.translate(_TO_LOWER)


def to_ascii_uppercase(s: str) -> str:
    """Replace each ASCII lower alpha with its ASCII upper alpha counterpart."""
    return s.translate(_TO_UPPER)


def ascii_case_insensitive_match(a: str, b: str) -> bool:
    return to_ascii_lowercase(a) == to_ascii_lowercase(b)


def is_ascii_string(s: str) -> bool:
    return s.isascii()


# === Encoding bridges =========================================================

def isomorphic_encode(s: str) -> bytes:
    """Map each code point (all ≤ U+00FF) to the byte of the same value."""
    try:
        return s.encode("latin-1")
    except UnicodeEncodeError as exc:
        logger.debug(
            "Isomorphic encode rejected input",
            extra={"error_code": "NON_ISOMORPHIC_STRING", "code_point": ord(s[exc.start])},
        )
        raise NonIsomorphicStringError(ord(s[exc.start]), exc.start) from exc


def isomorphic_decode(data: BytesLike) -> str:
    """Map each byte to the code point of the same value."""
    return bytes(data).decode("latin-1")


def ascii_encode(s: str) -> bytes:
    """Isomorphic encode of a string that must be an ASCII string."""
    try:
        return s.encode("ascii")
    except UnicodeEncodeError as exc:
        logger.debug(
            "ASCII encode rejected input",
            extra={"error_code": "NOT_ASCII", "code_point": ord(s[exc.start])},
        )
        raise NotASCIIError(ord(s[exc.start]), exc.start) from exc


def ascii_decode(data: BytesLike) -> str:
    """Isomorphic decode of a byte sequence that must contain only ASCII bytes."""
    data = bytes(data)
    if not is_ascii_byte_sequence(data):
        index = next(i for i, byte in enumerate(data) if byte > 0x7F)
        logger.debug("ASCII decode rejected input", extra={"error_code": "NOT_ASCII"})
        raise NotASCIIError(data[index], index)
    return data.decode("ascii")


# === Code units ===============================================================

def _code_units(s: str) -> bytes:
    return s.encode("utf-16-be", "surrogatepass")


def code_unit_length(s: str) -> int:
    """Length in UTF-16 code units (astral code points count twice)."""
    return len(_code_units(s)) // 2


def is_code_unit_prefix(potential_prefix: str, s: str) -> bool:
    return _code_units(s).startswith(_code_units(potential_prefix))


def code_unit_less_than(a: str, b: str) -> bool:
    """Infra string ordering by code units.

    Differs from Python's str ordering for astral characters:
    U+10000 (D800 DC00) sorts before U+FFFD.
    """
    return _code_units(a) < _code_units(b)


def concatenate(items: Iterable[str], separator: str = "") -> str:
    """Join a list of strings, with an optional separator between items."""
    return separator.join(items)
