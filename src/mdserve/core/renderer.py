"""Markdown document rendering.

Loads a document from storage, converts it with Python-Markdown and fills the
page template. Nothing is cached: every request reads and converts the
source again.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import markdown
from jinja2 import Template

from mdserve.config import SiteConfig
from mdserve.core.titles import derive_title

logger = logging.getLogger(__name__)

# Structural extensions plus attr_list for inline {: .class #id } annotations
MARKDOWN_EXTENSIONS = [
    "tables",
    "fenced_code",
    "def_list",
    "footnotes",
    "abbr",
    "attr_list",
    "toc",
    "sane_lists",
]


@dataclass(frozen=True)
class Page:
    """Rendered document ready to be placed into the page template."""

    title: str
    body: str
    site_name: str
    lang: str | None = None


class PageRenderer:
    """Renders markdown documents into complete HTML pages.

    The compiled template is shared between requests and only read; each
    call to render() builds its own Page.
    """

    def __init__(self, site: SiteConfig, template: Template) -> None:
        """Initialize renderer.

        Args:
            site: Site configuration (name and language for the template)
            template: Compiled page template
        """
        self._site = site
        self._template = template

    @property
    def site(self) -> SiteConfig:
        return self._site

    def render(self, storage_path: Path) -> Page:
        """Load and convert a markdown document.

        Args:
            storage_path: Path to the markdown source

        Returns:
            Page with converted body and derived title

        Raises:
            FileNotFoundError: If the source cannot be read, whatever the cause
        """
        try:
            contents = storage_path.read_bytes()
        except (OSError, ValueError) as e:
            # ValueError: embedded null byte in an untrusted path
            logger.debug(f"Cannot read {storage_path}: {e}")
            raise FileNotFoundError(f"Source file not found: {storage_path}") from e

        body = markdown.markdown(
            contents.decode("utf-8", errors="replace"),
            extensions=MARKDOWN_EXTENSIONS,
        )

        return Page(
            title=derive_title(storage_path),
            body=body,
            site_name=self._site.name,
            lang=self._site.lang,
        )

    def generate(self, page: Page) -> Iterator[str]:
        """Render the page template piece by piece.

        Args:
            page: Page to render

        Yields:
            Chunks of the HTML document

        Raises:
            jinja2.TemplateError: If template execution fails midway
        """
        return self._template.generate(
            title=page.title,
            body=page.body,
            site_name=page.site_name,
            lang=page.lang,
        )
