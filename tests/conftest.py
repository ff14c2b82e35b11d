"""Shared test fixtures."""

from pathlib import Path

import pytest
from mdserve.config import Config, ServerConfig, SiteConfig


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create an empty storage root."""
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def test_config(site_root: Path) -> Config:
    """Create a test configuration serving site_root."""
    return Config(
        server=ServerConfig(),
        site=SiteConfig(
            root=site_root,
            hostname="https://example.org",
            name="Test Site",
        ),
    )
