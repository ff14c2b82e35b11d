"""Catch-all request dispatcher.

Resolves every request path to either a markdown document, rendered into the
page template, or a static asset streamed from the storage root.
"""

import logging
from pathlib import Path

from aiohttp import web
from jinja2 import TemplateError

from mdserve.app_keys import config_key, renderer_key
from mdserve.core.resolver import PathTraversalError, resolve_path
from mdserve.core.types import ContentKind

logger = logging.getLogger(__name__)


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.route("*", "/{path:.*}", serve_path),
    ]


async def serve_path(request: web.Request) -> web.StreamResponse:
    path = request.match_info["path"]
    config = request.app[config_key]

    try:
        resolved = resolve_path(config.site.root, path)
    except PathTraversalError:
        logger.warning(f"Rejected path outside storage root: {path!r}")
        raise web.HTTPNotFound() from None

    if resolved.kind is ContentKind.DOCUMENT:
        return await _serve_document(request, resolved.storage_path)

    if not resolved.storage_path.is_file():
        raise web.HTTPNotFound()
    return web.FileResponse(resolved.storage_path)


async def _serve_document(request: web.Request, storage_path: Path) -> web.StreamResponse:
    renderer = request.app[renderer_key]

    try:
        page = renderer.render(storage_path)
    except FileNotFoundError:
        raise web.HTTPNotFound() from None

    response = web.StreamResponse()
    response.content_type = "text/html"
    response.charset = "utf-8"
    await response.prepare(request)

    try:
        for chunk in renderer.generate(page):
            await response.write(chunk.encode("utf-8"))
    except TemplateError:
        # Headers are already sent, the client gets a truncated page
        logger.exception(f"Failed to render page template for {storage_path}")

    await response.write_eof()
    return response
