"""Configuration management for mdserve.

Supports TOML configuration format with auto-discovery. A loaded Config is
immutable; CLI overrides produce a new instance.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "mdserve.toml"


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass(frozen=True)
class SiteConfig:
    """Site configuration."""

    root: Path = field(default_factory=lambda: Path("."))
    hostname: str = "http://example.com"
    name: str = "Example"
    lang: str | None = None


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    server: ServerConfig
    site: SiteConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Read settings from ``config_path`` or a discovered mdserve.toml.

        Without an explicit path the current directory and its parents are
        searched; when nothing is found every setting keeps its default.

        Raises:
            FileNotFoundError: If an explicit config_path is missing
            ValueError: If the file is not valid TOML or a value has the wrong type
        """
        if config_path is None:
            config_path = find_config_file(Path.cwd())
            if config_path is None:
                return cls(server=ServerConfig(), site=SiteConfig())
        elif not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with config_path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

        return cls(
            server=cls._parse_server(data.get("server")),
            site=cls._parse_site(data.get("site"), config_path.parent),
            config_path=config_path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Validate the [server] table."""
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8000)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")
        if not 0 < port < 65536:
            raise ValueError("server.port must be between 1 and 65535")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_site(cls, data: object, config_dir: Path) -> SiteConfig:
        """Validate the [site] table; root is relative to config_dir."""
        if data is None:
            return SiteConfig(root=config_dir)

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        root = data.get("root", ".")
        if not isinstance(root, str):
            raise ValueError("site.root must be a string")

        hostname = data.get("hostname", "http://example.com")
        if not isinstance(hostname, str):
            raise ValueError("site.hostname must be a string")

        name = data.get("name", "Example")
        if not isinstance(name, str):
            raise ValueError("site.name must be a string")

        lang = data.get("lang")
        if lang is not None and not isinstance(lang, str):
            raise ValueError("site.lang must be a string")

        return SiteConfig(
            root=config_dir / root,
            hostname=hostname,
            name=name,
            lang=lang or None,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        root: Path | None = None,
        hostname: str | None = None,
        site_name: str | None = None,
        lang: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            root: Override site.root
            hostname: Override site.hostname
            site_name: Override site.name
            lang: Override site.lang

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

        site = self.site
        if any(value is not None for value in (root, hostname, site_name, lang)):
            site = replace(
                self.site,
                root=root if root is not None else self.site.root,
                hostname=hostname if hostname is not None else self.site.hostname,
                name=site_name if site_name is not None else self.site.name,
                lang=lang if lang is not None else self.site.lang,
            )

        return replace(self, server=server, site=site)


def find_config_file(start: Path) -> Path | None:
    """Return the nearest mdserve.toml in start or one of its parents."""
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
