"""Data types for scanning a folder for office documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pdfsweep.scanner.paths import relative_key


class DocumentType(str, Enum):
    """Office document families, one automation host per family."""

    WORD = "word"
    PRESENTATION = "presentation"
    SPREADSHEET = "spreadsheet"


DOCUMENT_EXTENSIONS: dict[DocumentType, frozenset[str]] = {
    DocumentType.WORD: frozenset({".doc", ".docx"}),
    DocumentType.PRESENTATION: frozenset({".ppt", ".pptx"}),
    DocumentType.SPREADSHEET: frozenset({".xls", ".xlsx"}),
}

# Flattened lookup: lowercased extension -> document type
EXTENSION_TYPES: dict[str, DocumentType] = {
    ext: doc_type
    for doc_type, extensions in DOCUMENT_EXTENSIONS.items()
    for ext in extensions
}


@dataclass(frozen=True)
class FileRecord:
    """A convertible document discovered under the scan root."""

    path: Path  # absolute
    extension: str  # lowercased, with leading dot
    relative_path: Path
    doc_type: DocumentType

    @property
    def key(self) -> str:
        return relative_key(self.relative_path)


@dataclass(frozen=True)
class ConversionTask:
    """A source document paired with the PDF it is written to."""

    record: FileRecord
    output_path: Path


@dataclass
class ScanResult:
    """Output of a folder scan."""

    candidates: list[FileRecord] = field(default_factory=list)
    existing_pdf_keys: set[str] = field(default_factory=set)
