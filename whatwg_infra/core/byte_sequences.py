"""Byte Sequences — case operations, matching and ordering over bytes.

Invariants:
    - Inputs may be bytes, bytearray or memoryview; outputs are always new bytes
    - Only 0x41–0x5A and 0x61–0x7A are case-mapped; every other byte passes through

Design Decisions:
    - bytes.lower()/upper() are ASCII-only by definition, so they are exact
      implementations of byte-lowercase/byte-uppercase
"""

from whatwg_infra.core.domain_types import MAX_ASCII

BytesLike = bytes | bytearray | memoryview


def byte_lowercase(data: BytesLike) -> bytes:
    """Increase each byte in 0x41–0x5A by 0x20."""
    return bytes(data).lower()


def byte_uppercase(data: BytesLike) -> bytes:
    """Subtract 0x20 from each byte in 0x61–0x7A."""
    return bytes(data).upper()


def byte_case_insensitive_match(a: BytesLike, b: BytesLike) -> bool:
    return byte_lowercase(a) == byte_lowercase(b)


def is_byte_prefix(potential_prefix: BytesLike, data: BytesLike) -> bool:
    """True if data starts with potential_prefix (the empty sequence is a prefix of all)."""
    return bytes(data).startswith(bytes(potential_prefix))


def byte_less_than(a: BytesLike, b: BytesLike) -> bool:
    """Infra byte ordering.

    If b is a prefix of a, a is not less. If a is a prefix of b, a is less.
    Otherwise the first differing byte decides.
    """
    a, b = bytes(a), bytes(b)
    if is_byte_prefix(b, a):
        return False
    if is_byte_prefix(a, b):
        return True
    for x, y in zip(a, b):
        if x != y:
            return x < y
    return False


def is_ascii_byte_sequence(data: BytesLike) -> bool:
    return all(byte <= MAX_ASCII for byte in bytes(data))
