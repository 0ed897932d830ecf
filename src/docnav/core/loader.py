"""Documentation tree loader.

Scans a source directory for markdown pages and builds the Directory tree
that navigation is derived from.
"""

import logging
import re
from pathlib import Path, PurePosixPath

from docnav.core.site import Directory, Document
from docnav.core.uri import is_index_stem

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".md"
INDEX_FILENAME = "README.md"

_H1_PATTERN = re.compile(r"^#[ \t]+(.+?)[ \t]*$")
_FENCE_PATTERN = re.compile(r"^[ ]{0,3}(`{3,}|~{3,})")


class SiteLoader:
    """Loads the document tree from the filesystem.

    Hidden entries and entries starting with an underscore are skipped, as
    are directories without any pages. Directories with pages but no
    README.md or index.md get a generated index page titled after the
    directory name.
    """

    def __init__(self, source_dir: Path) -> None:
        """Initialize loader.

        Args:
            source_dir: Root directory containing markdown sources
        """
        self._source_dir = source_dir

    def load(self) -> Directory:
        """Load the document tree.

        Returns:
            Root Directory. Empty apart from its index page when the source
            directory doesn't exist.
        """
        root: Directory | None = None
        if self._source_dir.is_dir():
            root = self._scan(self._source_dir, PurePosixPath())
        else:
            logger.warning(f"Source directory not found: {self._source_dir}")

        if root is None:
            return Directory(
                path=PurePosixPath(),
                docs=(self._generated_index(PurePosixPath(), self._source_dir.name),),
            )
        return root

    def _scan(self, fs_dir: Path, rel_dir: PurePosixPath) -> Directory | None:
        """Recursively scan a directory, returning None if it has no pages."""
        docs: list[Document] = []
        dirs: list[Directory] = []

        for entry in sorted(fs_dir.iterdir(), key=lambda p: p.name):
            if entry.name.startswith((".", "_")):
                logger.debug(f"Skipping {entry}")
                continue

            if entry.is_dir():
                child = self._scan(entry, rel_dir / entry.name)
                if child is not None:
                    dirs.append(child)
            elif entry.suffix == PAGE_SUFFIX:
                docs.append(self._read_document(entry, rel_dir / entry.name))

        if not docs and not dirs:
            return None

        if not any(doc.is_index for doc in docs):
            logger.warning(f"No index page in {fs_dir}, generating one")
            docs.insert(0, self._generated_index(rel_dir, fs_dir.name))

        return Directory(path=rel_dir, docs=tuple(docs), dirs=tuple(dirs))

    def _read_document(self, source: Path, rel_path: PurePosixPath) -> Document:
        """Read a markdown page and extract its title."""
        try:
            title = _extract_title(source.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {source}, using filename as title: {e}")
            title = None

        if title is None:
            is_index = is_index_stem(source.stem)
            title = humanize(source.parent.name if is_index else source.stem)
        return Document(path=rel_path, title=title)

    def _generated_index(self, rel_dir: PurePosixPath, name: str) -> Document:
        return Document(path=rel_dir / INDEX_FILENAME, title=humanize(name))


def _extract_title(text: str) -> str | None:
    """Extract title from the first H1 heading outside fenced code blocks."""
    fence: str | None = None
    for line in text.splitlines():
        fence_match = _FENCE_PATTERN.match(line)
        if fence_match is not None:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif marker[0] == fence[0] and len(marker) >= len(fence):
                fence = None
            continue

        if fence is None and (match := _H1_PATTERN.match(line)) is not None:
            return match.group(1)
    return None


def humanize(name: str) -> str:
    """Turn a file or directory name into a title.

    Example: "setup-guide" -> "Setup Guide"
    """
    words = re.split(r"[-_\s]+", name)
    return " ".join(word.capitalize() for word in words if word)
