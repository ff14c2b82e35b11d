"""Tests for server module."""

import pytest
from jinja2 import TemplateSyntaxError
from mdserve.app_keys import config_key, renderer_key
from mdserve.config import Config
from mdserve.server import create_app


class TestCreateApp:
    """Tests for create_app()."""

    def test__valid_config__returns_configured_app(self, test_config: Config) -> None:
        """Create app with valid configuration."""
        app = create_app(test_config)

        assert app[config_key] is test_config
        assert app[renderer_key].site == test_config.site

    def test__broken_template__fails_at_startup(self, test_config: Config) -> None:
        """Template parse errors prevent the app from being created."""
        with pytest.raises(TemplateSyntaxError):
            create_app(test_config, template_source="{% for %}")

    def test__sitemap_route__registered_before_catch_all(self, test_config: Config) -> None:
        """The sitemap route takes precedence over the dispatcher."""
        app = create_app(test_config)

        canonicals = [resource.canonical for resource in app.router.resources()]
        assert canonicals.index("/sitemap.xml") < canonicals.index("/{path}")
