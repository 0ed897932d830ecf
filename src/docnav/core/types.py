"""Core type definitions."""

from typing import NewType

# Canonical URI of a page (e.g., "/", "/guide", "/domain/page")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)
