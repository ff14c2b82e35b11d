"""aiohttp server for mdserve.

Application factory and route registration.
"""

from aiohttp import web

from mdserve.api.pages import create_pages_routes
from mdserve.api.sitemap import create_sitemap_routes
from mdserve.app_keys import config_key, renderer_key
from mdserve.assets import compile_page_template
from mdserve.config import Config
from mdserve.core.renderer import PageRenderer


def create_app(config: Config, *, template_source: str | None = None) -> web.Application:
    """Create aiohttp application.

    The page template is compiled here, so a broken template stops the
    application from being created at all.

    Args:
        config: Application configuration
        template_source: Page template source (defaults to the bundled one)

    Returns:
        Configured aiohttp application

    Raises:
        jinja2.TemplateSyntaxError: If the page template cannot be parsed
    """
    app = web.Application()

    template = compile_page_template(template_source)

    app[config_key] = config
    app[renderer_key] = PageRenderer(config.site, template)

    # Sitemap must be registered first to take precedence over the catch-all
    app.router.add_routes(create_sitemap_routes())
    app.router.add_routes(create_pages_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
