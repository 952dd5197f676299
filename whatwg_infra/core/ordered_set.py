"""Ordered Set of Strings — unique items with observable insertion order.

Invariants:
    - All functions are pure: return NEW lists, never mutate the input
    - Results never contain duplicates
    - Inserting an item already present leaves order and membership unchanged
    - Binary operations keep the order of the first operand (then the second, for union)

Design Decisions:
    - Plain list[str] over a custom class: callers keep using list/tuple
      literals, and order is visible in reprs and equality
    - dict.fromkeys for deduplication: insertion-ordered, first occurrence wins
"""

from collections.abc import Iterable, Sequence


def create_ordered_set(items: Iterable[str]) -> list[str]:
    """Build an ordered set from any iterable, keeping the first occurrence."""
    return list(dict.fromkeys(items))


def contains(oset: Sequence[str], item: str) -> bool:
    return item in oset


def insert_unique_preserving_order(oset: Sequence[str], item: str) -> list[str]:
    """Append item unless already present."""
    if item in oset:
        return list(oset)
    return [*oset, item]


def prepend_unique(oset: Sequence[str], item: str) -> list[str]:
    """Prepend item unless already present (existing position is kept)."""
    if item in oset:
        return list(oset)
    return [item, *oset]


def extend_unique(oset: Sequence[str], items: Iterable[str]) -> list[str]:
    """Append each of items in turn, skipping ones already present."""
    return create_ordered_set([*oset, *items])


def remove(oset: Sequence[str], item: str) -> list[str]:
    return [existing for existing in oset if existing != item]


def replace(oset: Sequence[str], item: str, replacement: str) -> list[str]:
    """Replace the first instance of item or replacement with replacement.

    All other instances of either are removed. Sets containing neither
    come back unchanged.
    """
    result = []
    replaced = False
    for existing in oset:
        if existing in (item, replacement):
            if not replaced:
                result.append(replacement)
                replaced = True
            continue
        result.append(existing)
    return result


def is_subset(a: Sequence[str], b: Sequence[str]) -> bool:
    """True if every item of a is in b."""
    return all(item in b for item in a)


def is_superset(a: Sequence[str], b: Sequence[str]) -> bool:
    return is_subset(b, a)


def sets_equal(a: Sequence[str], b: Sequence[str]) -> bool:
    """Same members, order ignored."""
    return is_subset(a, b) and is_subset(b, a)


def intersection(a: Sequence[str], b: Sequence[str]) -> list[str]:
    return [item for item in create_ordered_set(a) if item in b]


def union(a: Sequence[str], b: Sequence[str]) -> list[str]:
    return extend_unique(create_ordered_set(a), b)


def difference(a: Sequence[str], b: Sequence[str]) -> list[str]:
    return [item for item in create_ordered_set(a) if item not in b]
