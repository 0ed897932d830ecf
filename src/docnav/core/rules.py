"""Navigation rules.

A rule list describes which pages and directories appear in the navigation,
in what order, and how deep. Rules refer to pages by their path from the
project root (e.g., "docs/guide/setup.md").
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class WildCard(Enum):
    """Include every child of a directory unchanged."""

    WILDCARD = "*"


WILDCARD = WildCard.WILDCARD


@dataclass(frozen=True)
class Explicit:
    """Include only the children selected by nested rules."""

    rules: tuple[NavRule, ...]


@dataclass(frozen=True)
class FileRule:
    """Single page entry."""

    path: PurePath


@dataclass(frozen=True)
class DirRule:
    """Directory entry.

    Attributes:
        path: Directory path
        include: None for no nested menu, WILDCARD for all original
            children, or Explicit for a reshaped set of children
    """

    path: PurePath
    include: WildCard | Explicit | None = None


NavRule = FileRule | DirRule
DirIncludeRule = WildCard | Explicit
