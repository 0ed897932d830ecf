"""Navigation tree builder.

Derives the default navigation tree from the site's directory structure and
optionally reshapes it with the configured navigation rules. Navigation is a
view layer over the document hierarchy: links are newly built values and
never share state with the directory tree.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import TYPE_CHECKING, TypedDict

from docnav.core.rules import DirRule, Explicit, FileRule, NavRule, WildCard
from docnav.core.site import Directory
from docnav.core.sorting import sort_by_title
from docnav.core.types import URLPath
from docnav.core.uri import path_to_uri, rule_path_to_uri

if TYPE_CHECKING:
    from docnav.config import Config

logger = logging.getLogger(__name__)


class LinkDict(TypedDict):
    """Dictionary representation of a navigation link."""

    path: str
    title: str
    children: list[LinkDict]


class UnmatchedRuleError(LookupError):
    """Raised when a navigation rule refers to a page that does not exist."""

    def __init__(self, path: PurePath) -> None:
        super().__init__(f"Could not find a page matching navigation rule: {path}")
        self.path = path


@dataclass
class Link:
    """Navigation entry with children for the UI tree."""

    path: URLPath
    title: str
    children: list[Link] = field(default_factory=list)

    def clone(self) -> Link:
        """Return a deep copy of this link and its subtree."""
        return Link(
            path=self.path,
            title=self.title,
            children=[child.clone() for child in self.children],
        )

    def to_dict(self) -> LinkDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "title": self.title,
            "children": [child.to_dict() for child in self.children],
        }


def build_default_links(directory: Directory) -> list[Link]:
    """Build the default navigation for a directory.

    Pages come from the directory's own documents, except its index page,
    and from its subdirectories, each represented by their index page with
    the subdirectory's own listing as children. Entries are sorted by title
    in natural order; equal titles keep documents before directories.

    Args:
        directory: Directory to build navigation for

    Returns:
        Sorted list of links
    """
    index_uri = path_to_uri(directory.index.html_path)

    links = [
        Link(title=doc.title, path=uri)
        for doc in directory.docs
        if (uri := path_to_uri(doc.html_path)) != index_uri
    ]
    links.extend(
        Link(
            title=child.index.title,
            path=path_to_uri(child.index.html_path),
            children=build_default_links(child),
        )
        for child in directory.dirs
    )

    return sort_by_title(links)


def customize(rules: Sequence[NavRule], candidates: Sequence[Link]) -> list[Link]:
    """Reshape links according to navigation rules.

    Output follows rule order. Candidates no rule refers to are dropped.
    The candidates themselves are left untouched.

    Args:
        rules: Navigation rules for this level
        candidates: Links available at this level

    Returns:
        New list of links

    Raises:
        UnmatchedRuleError: If a rule path matches no candidate
    """
    links: list[Link] = []

    for rule in rules:
        matched = _find_matching_link(rule.path, candidates)
        if matched is None:
            raise UnmatchedRuleError(rule.path)

        match rule:
            case FileRule():
                links.append(matched.clone())
            case DirRule(include=None):
                links.append(Link(path=matched.path, title=matched.title))
            case DirRule(include=WildCard.WILDCARD):
                links.append(matched.clone())
            case DirRule(include=Explicit(rules=nested)):
                logger.debug(f"Applying {len(nested)} nested rules under {matched.path}")
                links.append(
                    Link(
                        path=matched.path,
                        title=matched.title,
                        children=customize(nested, matched.children),
                    )
                )

    return links


def find_link(links: Sequence[Link], path: str) -> Link | None:
    """Find a link anywhere in a tree by its URI.

    Args:
        links: Top-level links to search
        path: Link path, with or without leading slash

    Returns:
        Matching link, or None if not found
    """
    normalized = path if path.startswith("/") else f"/{path}"
    for link in links:
        if link.path == normalized:
            return link
        found = find_link(link.children, normalized)
        if found is not None:
            return found
    return None


def _find_matching_link(path: PurePath, links: Sequence[Link]) -> Link | None:
    """Find the first link whose URI matches a rule path."""
    uri = rule_path_to_uri(path)
    for link in links:
        if link.path == uri:
            return link
    return None


class Navigation:
    """Builds the navigation tree for a site.

    Without rules the default tree is returned as is. With rules, including
    an empty list, the default tree is reshaped by them.
    """

    def __init__(self, rules: Sequence[NavRule] | None = None) -> None:
        self._rules = rules

    @classmethod
    def from_config(cls, config: Config) -> Navigation:
        return cls(config.navigation)

    def build_for(self, directory: Directory) -> list[Link]:
        """Build navigation links for a site root.

        Raises:
            UnmatchedRuleError: If a configured rule matches no page
        """
        default = build_default_links(directory)
        logger.debug(f"Built default navigation with {len(default)} top-level links")

        if self._rules is None:
            return default

        logger.debug(f"Customizing navigation with {len(self._rules)} rules")
        return customize(self._rules, default)
