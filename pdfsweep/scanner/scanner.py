"""Recursive folder scan for convertible documents and existing PDFs."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pdfsweep.errors import ScanAccessError
from pdfsweep.scanner.models import (
    EXTENSION_TYPES,
    DocumentType,
    FileRecord,
    ScanResult,
)
from pdfsweep.scanner.paths import PDF_EXTENSION, relative_key

logger = logging.getLogger(__name__)


def scan(
    root: str | Path,
    extensions: Mapping[str, DocumentType] = EXTENSION_TYPES,
) -> ScanResult:
    """Walk root and collect candidate documents plus the keys of existing PDFs.

    Directories that cannot be listed are skipped.
    """
    root = Path(root).resolve()
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    result = ScanResult()
    for dirpath, dirnames, filenames in os.walk(root, onerror=_skip_unreadable):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            ext = path.suffix.lower()
            relative = path.relative_to(root)

            if ext == PDF_EXTENSION:
                result.existing_pdf_keys.add(relative_key(relative))
                continue

            doc_type = extensions.get(ext)
            if doc_type is None:
                continue
            result.candidates.append(
                FileRecord(
                    path=path,
                    extension=ext,
                    relative_path=relative,
                    doc_type=doc_type,
                )
            )

    logger.debug(
        "Scanned %s: %d candidate(s), %d existing PDF(s)",
        root,
        len(result.candidates),
        len(result.existing_pdf_keys),
    )
    return result


def _skip_unreadable(error: OSError) -> None:
    logger.debug("%s", ScanAccessError(error.filename, error))
