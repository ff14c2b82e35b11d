"""Sitemap generation.

Discovers every markdown document under the storage root and serializes them
as a sitemaps.org feed. The root is walked again on every call; there is no
persistent index.
"""

import logging
import os
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from urllib.parse import quote
from xml.etree import ElementTree as ET

from mdserve.core.resolver import file_extension
from mdserve.core.types import DOCUMENT_EXTENSION

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
CHANGE_FREQUENCY = "weekly"


@dataclass(frozen=True)
class SitemapEntry:
    """Document discovered under the storage root."""

    path: str
    last_modified: datetime


def find_sitemap_entries(root: Path) -> list[SitemapEntry]:
    """Collect all markdown documents below root.

    Directories are visited depth-first with entries in lexical order.
    Unreadable files and subdirectories are skipped. If the root itself
    cannot be listed the failure is logged and no entries are returned.

    Args:
        root: Storage root directory

    Returns:
        Entries with root-relative paths stripped of the document extension
    """
    try:
        top = _scan(root)
    except OSError as e:
        logger.warning(f"Unable to walk the root directory {root}: {e}")
        return []

    return _collect(top)


def _scan(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def _collect(top: list[os.DirEntry[str]]) -> list[SitemapEntry]:
    entries: list[SitemapEntry] = []
    # (remaining entries, relative prefix) per open directory
    stack = [(iter(top), "")]

    while stack:
        pending, prefix = stack[-1]
        dir_entry = next(pending, None)
        if dir_entry is None:
            stack.pop()
            continue

        relative = prefix + dir_entry.name
        try:
            if dir_entry.is_dir(follow_symlinks=False):
                stack.append((iter(_scan(Path(dir_entry.path))), relative + "/"))
                continue

            if file_extension(dir_entry.name) != DOCUMENT_EXTENSION:
                continue

            mtime = dir_entry.stat().st_mtime
        except OSError as e:
            logger.debug(f"Skipping {dir_entry.path}: {e}")
            continue

        entries.append(
            SitemapEntry(
                path=relative[: -len(DOCUMENT_EXTENSION)],
                last_modified=datetime.fromtimestamp(mtime, tz=UTC),
            )
        )

    return entries


def build_location(hostname: str, path: str) -> str:
    """Join the public hostname and a document path into an absolute URL."""
    return f"{hostname.rstrip('/')}/{quote(path)}"


def build_sitemap(entries: list[SitemapEntry], hostname: str) -> bytes:
    """Serialize entries as a sitemap XML document.

    Args:
        entries: Documents to list
        hostname: Public base URL, e.g. "https://example.com"

    Returns:
        UTF-8 encoded XML with declaration; an empty urlset when there are
        no entries
    """
    ET.register_namespace("", SITEMAP_NAMESPACE)
    urlset = ET.Element(f"{{{SITEMAP_NAMESPACE}}}urlset")

    for entry in entries:
        url = ET.SubElement(urlset, f"{{{SITEMAP_NAMESPACE}}}url")
        ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}loc").text = build_location(hostname, entry.path)
        ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}lastmod").text = entry.last_modified.isoformat(
            timespec="seconds"
        )
        ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}changefreq").text = CHANGE_FREQUENCY

    return ET.tostring(urlset, encoding="utf-8", xml_declaration=True)
