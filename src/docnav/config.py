"""Configuration management for Docnav.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path, PurePosixPath

from docnav.core.loader import PAGE_SUFFIX
from docnav.core.rules import WILDCARD, DirIncludeRule, DirRule, Explicit, FileRule, NavRule

CONFIG_FILENAME = "docnav.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class DocsConfig:
    """Documentation configuration."""

    source_dir: Path = field(default_factory=lambda: Path("docs"))


@dataclass
class Config:
    """Application configuration.

    ``navigation`` is None when no navigation rules are configured, in which
    case the default navigation tree is used unchanged.
    """

    server: ServerConfig
    docs: DocsConfig
    navigation: list[NavRule] | None = None
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for docnav.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(server=ServerConfig(), docs=DocsConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            docs=cls._parse_docs(data.get("docs"), config_dir),
            navigation=cls._parse_navigation(data.get("navigation")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(source_dir=config_dir / "docs")

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        source_dir = data.get("source_dir", "docs")
        if not isinstance(source_dir, str):
            raise ValueError("docs.source_dir must be a string")

        return DocsConfig(source_dir=config_dir / source_dir)

    @classmethod
    def _parse_navigation(cls, data: object) -> list[NavRule] | None:
        """Parse the navigation rule list.

        Args:
            data: Raw navigation array data

        Returns:
            List of rules, or None if navigation isn't configured
        """
        if data is None:
            return None

        return cls._parse_rules(data, "navigation")

    @classmethod
    def _parse_rules(cls, data: object, key: str) -> list[NavRule]:
        if not isinstance(data, list):
            raise ValueError(f"{key} must be a list")

        return [cls._parse_rule(item, f"{key}[{i}]") for i, item in enumerate(data)]

    @classmethod
    def _parse_rule(cls, data: object, key: str) -> NavRule:
        """Parse a single navigation rule.

        A rule with children is a directory rule. Without children, paths
        ending in .md are pages and anything else is a directory without a
        nested menu.
        """
        if not isinstance(data, dict):
            raise ValueError(f"{key} must be a dictionary")

        path = data.get("path")
        if not isinstance(path, str) or not path:
            raise ValueError(f"{key}.path must be a non-empty string")
        rule_path = PurePosixPath(path)

        unknown = set(data) - {"path", "children"}
        if unknown:
            raise ValueError(f"{key} has unknown keys: {', '.join(sorted(unknown))}")

        if "children" not in data:
            if rule_path.suffix == PAGE_SUFFIX:
                return FileRule(path=rule_path)
            return DirRule(path=rule_path)

        if rule_path.suffix == PAGE_SUFFIX:
            raise ValueError(f"{key}.children is only allowed on directories")

        return DirRule(
            path=rule_path,
            include=cls._parse_children(data["children"], f"{key}.children"),
        )

    @classmethod
    def _parse_children(cls, data: object, key: str) -> DirIncludeRule:
        if isinstance(data, str):
            if data != WILDCARD.value:
                raise ValueError(f'{key} must be "{WILDCARD.value}" or a list of rules')
            return WILDCARD

        return Explicit(rules=tuple(cls._parse_rules(data, key)))

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            source_dir: Override docs.source_dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        docs = self.docs
        if source_dir is not None:
            docs = replace(self.docs, source_dir=source_dir)

        return replace(self, server=server, docs=docs)
