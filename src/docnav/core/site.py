"""Document tree for a documentation site.

Represents the authored pages and directories that navigation is derived
from. Built by the loader, read by the navigation builder, never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from docnav.core.uri import is_index_stem

INDEX_FILENAME = "index.html"
PAGE_EXTENSION = ".html"


class MissingIndexError(ValueError):
    """Raised when a directory has no index document."""

    def __init__(self, path: PurePath) -> None:
        super().__init__(f"Directory has no index document: {path}")
        self.path = path


@dataclass(frozen=True)
class Document:
    """Authored page.

    Attributes:
        path: Source path relative to the documentation root (e.g., "guide/setup.md")
        title: Display title
    """

    path: PurePath
    title: str

    @property
    def is_index(self) -> bool:
        """Whether this page represents its directory."""
        return is_index_stem(self.path.stem)

    @property
    def html_path(self) -> PurePath:
        """Destination path of the rendered page."""
        if self.is_index:
            return self.path.with_name(INDEX_FILENAME)
        return self.path.with_suffix(PAGE_EXTENSION)


@dataclass(frozen=True)
class Directory:
    """Directory of pages with nested directories.

    Exactly one document is expected to be the index page, which stands for
    the directory itself in its parent's listing.
    """

    path: PurePath
    docs: tuple[Document, ...] = ()
    dirs: tuple[Directory, ...] = ()

    @property
    def index(self) -> Document:
        """Index document of this directory.

        Raises:
            MissingIndexError: If no document renders to index.html
        """
        for doc in self.docs:
            if doc.html_path.name == INDEX_FILENAME:
                return doc
        raise MissingIndexError(self.path)
