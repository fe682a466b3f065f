"""Incremental filter: drop documents that already have a PDF."""

from __future__ import annotations

from collections.abc import Iterable

from pdfsweep.scanner.models import DocumentType, FileRecord


def filter_candidates(
    candidates: Iterable[FileRecord],
    existing_pdf_keys: set[str],
    force_recompile: bool = False,
) -> list[FileRecord]:
    """Return the candidates that still need converting.

    Matching is on the relative key only, so a PDF older than its source
    still counts as converted.
    """
    if force_recompile:
        return list(candidates)
    return [c for c in candidates if c.key not in existing_pdf_keys]


def partition(records: Iterable[FileRecord]) -> dict[DocumentType, list[FileRecord]]:
    """Group records by document type, preserving order within each group."""
    groups: dict[DocumentType, list[FileRecord]] = {t: [] for t in DocumentType}
    for record in records:
        groups[record.doc_type].append(record)
    return groups
