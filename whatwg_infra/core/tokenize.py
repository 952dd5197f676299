"""Tokenizing — position-variable algorithms and string splitting.

Invariants:
    - Position variables are explicit: functions take a position and return
      the advanced position, nothing is mutated
    - A position at or past the end of input collects nothing
    - A negative position raises InvalidPositionError
    - split_on_ascii_whitespace never yields empty tokens;
      strictly_split always yields at least one token

Design Decisions:
    - Return (result, position) tuples: Python has no out-parameters, and a
      tuple keeps the algorithms pure
"""

import logging
from collections.abc import Callable

from whatwg_infra.core.code_points import is_ascii_whitespace
from whatwg_infra.core.errors import InvalidCodePointError, InvalidPositionError
from whatwg_infra.core.whitespace import strip_leading_trailing_whitespace

logger = logging.getLogger(__name__)


def _check_position(position: int) -> None:
    if position < 0:
        logger.debug("Rejected position", extra={"error_code": "INVALID_POSITION"})
        raise InvalidPositionError(position)


def collect_sequence_of_code_points(
    predicate: Callable[[str], bool], s: str, position: int = 0,
) -> tuple[str, int]:
    """Collect code points from position while predicate holds.

    Returns (collected, new_position).
    """
    _check_position(position)
    start = position
    while position < len(s) and predicate(s[position]):
        position += 1
    return s[start:position], position


def skip_ascii_whitespace(s: str, position: int = 0) -> int:
    """Advance position past any ASCII whitespace."""
    _, position = collect_sequence_of_code_points(is_ascii_whitespace, s, position)
    return position


def strictly_split(s: str, delimiter: str) -> list[str]:
    """Split on every occurrence of a single-code-point delimiter.

    Empty tokens are kept: "a,,b" -> ["a", "", "b"], "" -> [""].
    """
    if len(delimiter) != 1:
        logger.debug("Rejected delimiter", extra={"error_code": "INVALID_CODE_POINT"})
        raise InvalidCodePointError(
            delimiter, f"delimiter must be 1 character, got {len(delimiter)}",
        )

    def not_delimiter(c: str) -> bool:
        return c != delimiter

    token, position = collect_sequence_of_code_points(not_delimiter, s)
    tokens = [token]
    while position < len(s):
        position += 1  # skip delimiter
        token, position = collect_sequence_of_code_points(not_delimiter, s, position)
        tokens.append(token)
    return tokens


def split_on_ascii_whitespace(s: str) -> list[str]:
    """Split on runs of ASCII whitespace, dropping leading/trailing runs."""
    tokens = []
    position = skip_ascii_whitespace(s)
    while position < len(s):
        token, position = collect_sequence_of_code_points(
            lambda c: not is_ascii_whitespace(c), s, position,
        )
        tokens.append(token)
        position = skip_ascii_whitespace(s, position)
    return tokens


def split_on_commas(s: str) -> list[str]:
    """Split on U+002C, stripping ASCII whitespace from each token.

    "a, b ,c" -> ["a", "b", "c"]; a trailing comma adds no token; "" -> [].
    """
    tokens = []
    position = 0
    while position < len(s):
        token, position = collect_sequence_of_code_points(
            lambda c: c != ",", s, position,
        )
        tokens.append(strip_leading_trailing_whitespace(token))
        if position < len(s):
            position += 1  # skip comma
    return tokens
