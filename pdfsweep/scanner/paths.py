"""Map source documents to their PDF output paths."""

from __future__ import annotations

import os
from pathlib import Path

from pdfsweep.errors import InvalidPathError

PDF_EXTENSION = ".pdf"


def resolve(root: str | Path, path: str | Path) -> tuple[Path, Path]:
    """Return ``(relative_path, output_path)`` for a file under root.

    The output path keeps the file's location relative to root and swaps
    its extension for ``.pdf``. Raises InvalidPathError if ``path`` is not
    under ``root`` once ``..`` segments are collapsed.
    """
    root = Path(os.path.normpath(root))
    path = Path(os.path.normpath(path))
    try:
        relative = path.relative_to(root)
    except ValueError:
        raise InvalidPathError(root, path) from None
    if not relative.parts:
        raise InvalidPathError(root, path)
    return relative, root / relative.with_suffix(PDF_EXTENSION)


def relative_key(relative_path: str | Path) -> str:
    """Matching key for a root-relative path: no extension, POSIX separators, lowercase."""
    return Path(relative_path).with_suffix("").as_posix().lower()
