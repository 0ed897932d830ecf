"""Shared test fixtures."""

from pathlib import Path

import pytest
from docnav.config import Config, DocsConfig, ServerConfig


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create docs directory with a small nested structure."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "README.md").write_text("# Getting Started\n\nWelcome.")
    (docs / "one.md").write_text("# One\n\nFirst page.")
    (docs / "two.md").write_text("# Two\n\nSecond page.")

    child = docs / "child"
    child.mkdir()
    (child / "README.md").write_text("# Nested Root\n\nChild index.")
    (child / "three.md").write_text("# Three\n\nThird page.")

    return docs


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration pointing at docs_dir."""
    return Config(server=ServerConfig(), docs=DocsConfig(source_dir=docs_dir))
