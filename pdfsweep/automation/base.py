"""Abstract office automation interface for pdfsweep."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pdfsweep.automation.models import OpenOptions
from pdfsweep.scanner.models import DocumentType


class AutomationHost(ABC):
    """One office automation session bound to a single document type.

    A host is started once, converts documents one at a time (open, export,
    close), and is terminated when its batch ends. Hosts are not reentrant:
    callers keep at most one document open per session.
    """

    backend: str = ""

    def __init__(self, doc_type: DocumentType) -> None:
        self.doc_type = doc_type

    @property
    @abstractmethod
    def pdf_format(self) -> Any:
        """Backend-specific PDF export mode for this host's document type."""
        ...

    @abstractmethod
    def start(self) -> None:
        """Acquire the host session."""
        ...

    @abstractmethod
    def open_document(self, path: Path, options: OpenOptions) -> Any:
        """Open a document and return a handle for it."""
        ...

    @abstractmethod
    def export_pdf(self, handle: Any, output_path: Path) -> None:
        """Write the open document to output_path as PDF."""
        ...

    @abstractmethod
    def close_document(self, handle: Any) -> None:
        """Close a document without ending the session."""
        ...

    @abstractmethod
    def terminate(self) -> None:
        """Release the host session. Safe to call more than once."""
        ...
