"""Core type definitions."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# Source extension of renderable documents
DOCUMENT_EXTENSION = ".md"

# Document served for an empty request path
DEFAULT_DOCUMENT = "index"


class ContentKind(Enum):
    """What a request path names: a document to render or a file to stream."""

    DOCUMENT = "document"
    ASSET = "asset"


@dataclass(frozen=True)
class ResolvedPath:
    """Storage location of a request path and how it must be served."""

    storage_path: Path
    kind: ContentKind
