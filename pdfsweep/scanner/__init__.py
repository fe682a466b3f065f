"""Folder scanning, path mapping and incremental filtering."""

from pdfsweep.scanner.filter import filter_candidates, partition
from pdfsweep.scanner.models import (
    DOCUMENT_EXTENSIONS,
    EXTENSION_TYPES,
    ConversionTask,
    DocumentType,
    FileRecord,
    ScanResult,
)
from pdfsweep.scanner.paths import relative_key, resolve
from pdfsweep.scanner.scanner import scan

__all__ = [
    "ConversionTask",
    "DOCUMENT_EXTENSIONS",
    "DocumentType",
    "EXTENSION_TYPES",
    "FileRecord",
    "ScanResult",
    "filter_candidates",
    "partition",
    "relative_key",
    "resolve",
    "scan",
]
