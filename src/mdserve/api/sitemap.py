"""Sitemap endpoint."""

from aiohttp import web

from mdserve.app_keys import config_key
from mdserve.core.sitemap import build_sitemap, find_sitemap_entries


def create_sitemap_routes() -> list[web.RouteDef]:
    return [
        web.route("*", "/sitemap.xml", get_sitemap),
    ]


async def get_sitemap(request: web.Request) -> web.Response:
    site = request.app[config_key].site
    entries = find_sitemap_entries(site.root)

    return web.Response(
        body=build_sitemap(entries, site.hostname),
        content_type="application/xml",
        charset="utf-8",
    )
