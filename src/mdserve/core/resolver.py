"""Request path resolution.

Maps the path of an incoming request to a file under the storage root and
decides whether it is rendered as a document or streamed as an asset.
"""

import posixpath
from pathlib import Path

from mdserve.core.types import DEFAULT_DOCUMENT, DOCUMENT_EXTENSION, ContentKind, ResolvedPath


class PathTraversalError(ValueError):
    """Request path points outside the storage root."""


def file_extension(path: str) -> str:
    """Return the extension of the last path segment, including the dot.

    Any dot in the last segment starts an extension, so ``.bashrc`` and
    ``name.`` both have one. Returns an empty string otherwise.
    """
    name = path.rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot:]


def resolve_path(root: Path, raw_path: str) -> ResolvedPath:
    """Resolve a request path against the storage root.

    Paths without an extension name documents and get the document extension
    appended; paths with any extension (including ``.md``) name assets. There
    is no directory-index fallback: ``guide`` always means ``guide.md``.

    Args:
        root: Storage root directory
        raw_path: Request path without the leading slash, e.g. "guide/setup"

    Returns:
        ResolvedPath with the storage path and content kind

    Raises:
        PathTraversalError: If the normalized path escapes the root
    """
    path = raw_path.lstrip("/") or DEFAULT_DOCUMENT

    if file_extension(path):
        kind = ContentKind.ASSET
    else:
        path += DOCUMENT_EXTENSION
        kind = ContentKind.DOCUMENT

    relative = posixpath.normpath(path)
    if relative == ".." or relative.startswith("../"):
        raise PathTraversalError(f"Path escapes storage root: {raw_path}")

    return ResolvedPath(storage_path=root / relative, kind=kind)
