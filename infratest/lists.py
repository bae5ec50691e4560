"""Helpers for working with lists of strings."""

from collections.abc import Iterable, Sequence


def list_contains(haystack: Iterable[str], needle: str) -> bool:
    """Return True if ``needle`` is an element of ``haystack``."""
    return needle in haystack


def list_intersection(list1: Sequence[str], list2: Sequence[str]) -> list[str]:
    """Return the items present in both lists, deduplicated, in the order of ``list1``."""
    wanted = set(list2)
    return list(dict.fromkeys(item for item in list1 if item in wanted))


def list_subtract(list1: Sequence[str], list2: Sequence[str]) -> list[str]:
    """Return the items of ``list1`` that do not appear in ``list2``."""
    unwanted = set(list2)
    return [item for item in list1 if item not in unwanted]