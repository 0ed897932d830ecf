"""Tests for navigation API endpoints."""

from pathlib import Path, PurePosixPath

import pytest
from aiohttp.test_utils import TestClient
from docnav.config import Config
from docnav.core.rules import WILDCARD, DirRule, FileRule
from docnav.server import create_app


@pytest.fixture
def nested_docs_dir(docs_dir: Path) -> Path:
    """Extend docs_dir with a second nesting level."""
    nested = docs_dir / "child" / "nested"
    nested.mkdir()
    (nested / "README.md").write_text("# Nested\n\nIndex.")
    (nested / "four.md").write_text("# Four\n\nContent.")
    return docs_dir


class TestGetNavigation:
    """Tests for GET /api/navigation."""

    @pytest.mark.asyncio
    async def test__default_tree(self, test_config: Config, aiohttp_client) -> None:
        client: TestClient = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/navigation")

        assert response.status == 200
        data = await response.json()
        assert [item["path"] for item in data["items"]] == ["/child", "/one", "/two"]

    @pytest.mark.asyncio
    async def test__configured_rules(self, test_config: Config, aiohttp_client) -> None:
        test_config.navigation = [
            FileRule(PurePosixPath("docs/two.md")),
            DirRule(PurePosixPath("docs/child"), WILDCARD),
        ]
        client: TestClient = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/navigation")

        assert response.status == 200
        data = await response.json()
        assert data["items"] == [
            {"path": "/two", "title": "Two", "children": []},
            {
                "path": "/child",
                "title": "Nested Root",
                "children": [{"path": "/child/three", "title": "Three", "children": []}],
            },
        ]

    @pytest.mark.asyncio
    async def test__unmatched_rule__returns_500(
        self, test_config: Config, aiohttp_client
    ) -> None:
        test_config.navigation = [FileRule(PurePosixPath("docs/missing.md"))]
        client: TestClient = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/navigation")

        assert response.status == 500
        data = await response.json()
        assert data == {"error": "Unmatched navigation rule", "path": "docs/missing.md"}

    @pytest.mark.asyncio
    async def test__reflects_new_pages(
        self, test_config: Config, docs_dir: Path, aiohttp_client
    ) -> None:
        client: TestClient = await aiohttp_client(create_app(test_config))
        (docs_dir / "added.md").write_text("# Added")

        response = await client.get("/api/navigation")

        data = await response.json()
        assert [item["title"] for item in data["items"]] == [
            "Added",
            "Nested Root",
            "One",
            "Two",
        ]


class TestGetNavigationSubtree:
    """Tests for GET /api/navigation/{path}."""

    @pytest.mark.asyncio
    async def test__returns_children(
        self, test_config: Config, nested_docs_dir: Path, aiohttp_client
    ) -> None:
        client: TestClient = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/navigation/child")

        assert response.status == 200
        data = await response.json()
        assert [item["path"] for item in data["items"]] == ["/child/nested", "/child/three"]

    @pytest.mark.asyncio
    async def test__deep_section(
        self, test_config: Config, nested_docs_dir: Path, aiohttp_client
    ) -> None:
        client: TestClient = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/navigation/child/nested")

        assert response.status == 200
        data = await response.json()
        assert data["items"] == [{"path": "/child/nested/four", "title": "Four", "children": []}]

    @pytest.mark.asyncio
    async def test__unknown_section__returns_404(
        self, test_config: Config, aiohttp_client
    ) -> None:
        client: TestClient = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/navigation/missing")

        assert response.status == 404
        data = await response.json()
        assert data == {"error": "Section not found", "path": "missing"}

    @pytest.mark.asyncio
    async def test__respects_rules(self, test_config: Config, aiohttp_client) -> None:
        test_config.navigation = [DirRule(PurePosixPath("docs/child"))]
        client: TestClient = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/navigation/child")

        assert response.status == 200
        data = await response.json()
        assert data["items"] == []
