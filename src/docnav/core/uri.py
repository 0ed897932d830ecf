"""Canonical URI resolution for document paths.

Maps destination paths like ``child/README.md`` or ``guide/setup.html`` to the
absolute, extension-free URIs used to identify navigation links.
"""

from pathlib import PurePath, PurePosixPath

from docnav.core.types import URLPath

INDEX_STEM = "index"
README_STEM = "readme"


def path_to_uri(path: str | PurePath) -> URLPath:
    """Resolve a document path to its canonical URI.

    Index pages (``index`` or ``README``) resolve to the URI of their
    directory. Separators are always forward slashes, whatever the host
    path convention.

    Args:
        path: Document path relative to the site root

    Returns:
        Absolute URI (e.g., "/guide/setup", or "/" for the root)
    """
    parts = _split(path)

    if parts:
        stem = _strip_extension(parts[-1])
        if is_index_stem(stem):
            parts = parts[:-1]
        else:
            parts[-1] = stem

    return URLPath("/" + "/".join(parts))


def is_index_stem(stem: str) -> bool:
    """Whether a file stem marks a directory index page.

    Matches "index" exactly and "README" in any case, so a page named
    "Index.md" is an ordinary page.
    """
    return stem == INDEX_STEM or stem.lower() == README_STEM


def rule_path_to_uri(path: str | PurePath) -> URLPath:
    """Resolve a navigation rule path to a canonical URI.

    Rule paths are written from the project root and so start with the
    documentation root segment (e.g., "docs/guide.md"), which is dropped
    before resolving.

    Args:
        path: Rule path as written in the configuration

    Returns:
        Absolute URI of the page or directory the rule refers to
    """
    return path_to_uri(PurePosixPath(*_split(path)[1:]))


def _split(path: str | PurePath) -> list[str]:
    """Split a path into its named components."""
    if isinstance(path, PurePath):
        pure = path
    else:
        pure = PurePosixPath(path.replace("\\", "/"))
    return [part for part in pure.parts if part not in ("", ".") and part != pure.anchor]


def _strip_extension(name: str) -> str:
    """Drop the last extension from a file name, keeping dotfiles intact."""
    dot = name.rfind(".")
    if dot <= 0:
        return name
    return name[:dot]
