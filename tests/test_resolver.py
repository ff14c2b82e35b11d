"""Tests for request path resolution."""

from pathlib import Path

import pytest
from mdserve.core.resolver import PathTraversalError, file_extension, resolve_path
from mdserve.core.types import ContentKind


class TestFileExtension:
    """Tests for file_extension()."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("guide", ""),
            ("guide.md", ".md"),
            ("css/main.css", ".css"),
            ("archive.tar.gz", ".gz"),
            ("v1.2/notes", ""),
            (".bashrc", ".bashrc"),
            ("name.", "."),
        ],
    )
    def test__path__returns_suffix_of_last_segment(self, path: str, expected: str) -> None:
        """Only the last path segment is considered."""
        assert file_extension(path) == expected


class TestResolvePath:
    """Tests for resolve_path()."""

    def test__no_extension__resolves_to_markdown_document(self, tmp_path: Path) -> None:
        """Append .md and classify as document."""
        resolved = resolve_path(tmp_path, "about")

        assert resolved.storage_path == tmp_path / "about.md"
        assert resolved.kind is ContentKind.DOCUMENT

    def test__nested_path__resolves_under_root(self, tmp_path: Path) -> None:
        """Nested paths keep their directories."""
        resolved = resolve_path(tmp_path, "foo/bar")

        assert resolved.storage_path == tmp_path / "foo" / "bar.md"
        assert resolved.kind is ContentKind.DOCUMENT

    def test__empty_path__resolves_to_index(self, tmp_path: Path) -> None:
        """Empty request path maps to index.md."""
        resolved = resolve_path(tmp_path, "")

        assert resolved.storage_path == tmp_path / "index.md"
        assert resolved.kind is ContentKind.DOCUMENT

    def test__extension__resolves_to_asset(self, tmp_path: Path) -> None:
        """Paths with an extension are assets and are not modified."""
        resolved = resolve_path(tmp_path, "css/main.css")

        assert resolved.storage_path == tmp_path / "css" / "main.css"
        assert resolved.kind is ContentKind.ASSET

    def test__markdown_extension__resolves_to_asset(self, tmp_path: Path) -> None:
        """Explicit .md is served raw, not rendered."""
        resolved = resolve_path(tmp_path, "about.md")

        assert resolved.storage_path == tmp_path / "about.md"
        assert resolved.kind is ContentKind.ASSET

    def test__directory_name__resolves_to_document_not_index(self, tmp_path: Path) -> None:
        """No directory-index fallback."""
        (tmp_path / "docs").mkdir()
        (tmp_path / "docs" / "index.md").write_text("# Docs")

        resolved = resolve_path(tmp_path, "docs")

        assert resolved.storage_path == tmp_path / "docs.md"
        assert resolved.kind is ContentKind.DOCUMENT

    def test__redundant_segments__are_collapsed(self, tmp_path: Path) -> None:
        """Collapse '.', '..' and duplicate separators inside the root."""
        resolved = resolve_path(tmp_path, "a//b/./../c")

        assert resolved.storage_path == tmp_path / "a" / "c.md"

    def test__leading_slashes__stay_under_root(self, tmp_path: Path) -> None:
        """Absolute-looking paths are joined under the root."""
        resolved = resolve_path(tmp_path, "/etc/passwd")

        assert resolved.storage_path == tmp_path / "etc" / "passwd.md"

    @pytest.mark.parametrize(
        "path",
        ["..", "../secret", "../secret.txt", "a/../../secret", "docs/../../../etc/passwd"],
    )
    def test__escaping_root__raises_traversal_error(self, tmp_path: Path, path: str) -> None:
        """Paths resolving above the root are rejected."""
        with pytest.raises(PathTraversalError, match="escapes storage root"):
            resolve_path(tmp_path, path)

    def test__traversal_error__is_value_error(self, tmp_path: Path) -> None:
        """PathTraversalError can be handled as ValueError."""
        with pytest.raises(ValueError):
            resolve_path(tmp_path, "../x")
