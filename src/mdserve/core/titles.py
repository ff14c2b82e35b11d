"""Page title derivation from file names."""

import re
from pathlib import Path

from mdserve.core.resolver import file_extension

_WORD_SEPARATORS = re.compile(r"[-_]")
_WORD_START = re.compile(r"(^|\s)(\S)")


def derive_title(storage_path: Path) -> str:
    """Derive a display title from a document file name.

    Drops the extension, turns hyphens and underscores into spaces and
    upper-cases the first letter of every whitespace-separated word. The rest
    of each word is left as is: "my-API-notes.md" becomes "My API Notes".

    Args:
        storage_path: Path to the document

    Returns:
        Title string, empty if the file name has no stem
    """
    name = storage_path.name
    stem = name[: len(name) - len(file_extension(name))]
    spaced = _WORD_SEPARATORS.sub(" ", stem)
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), spaced)
