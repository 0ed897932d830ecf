"""Natural ordering of display titles.

Titles are compared run by run: digit runs by numeric value, other runs
character by character. A digit run sorts before any other run at the same
position, so "2" < "11" < "Index" < "bb".
"""

import re
from collections.abc import Iterable
from typing import Protocol, TypeVar

_RUN_PATTERN = re.compile(r"\d+|\D+")

TitleKey = tuple[tuple[int, int, str], ...]


class Titled(Protocol):
    """Anything with a display title."""

    @property
    def title(self) -> str: ...


T = TypeVar("T", bound=Titled)


def natural_key(title: str) -> TitleKey:
    """Build a sort key for a title.

    Args:
        title: Display title

    Returns:
        Tuple of comparable runs
    """
    key: list[tuple[int, int, str]] = []
    for run in _RUN_PATTERN.findall(title):
        if run.isdecimal():
            key.append((0, int(run), run))
        else:
            key.append((1, 0, run))
    return tuple(key)


def compare_titles(a: str, b: str) -> int:
    """Compare two titles in natural order.

    Returns:
        -1 if a sorts first, 1 if b sorts first, 0 if they are equal
    """
    key_a = natural_key(a)
    key_b = natural_key(b)
    return (key_a > key_b) - (key_a < key_b)


def sort_by_title(items: Iterable[T]) -> list[T]:
    """Sort items by title in natural order.

    The sort is stable: items with equal titles keep their input order.
    """
    return sorted(items, key=lambda item: natural_key(item.title))
