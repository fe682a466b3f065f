"""Microsoft Office automation over COM (Windows, pywin32)."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pdfsweep.automation.base import AutomationHost
from pdfsweep.automation.models import OpenOptions
from pdfsweep.errors import AutomationFailure
from pdfsweep.scanner.models import DocumentType

logger = logging.getLogger(__name__)

try:
    import pywintypes
    import win32com.client
except ImportError:
    pywintypes = None  # type: ignore[assignment]
    win32com = None  # type: ignore[assignment]
    logger.debug("pywin32 not installed — COM automation disabled")


_PROG_IDS: dict[DocumentType, str] = {
    DocumentType.WORD: "Word.Application",
    DocumentType.PRESENTATION: "PowerPoint.Application",
    DocumentType.SPREADSHEET: "Excel.Application",
}

# wdFormatPDF, ppSaveAsPDF, xlTypePDF
_PDF_FORMATS: dict[DocumentType, int] = {
    DocumentType.WORD: 17,
    DocumentType.PRESENTATION: 32,
    DocumentType.SPREADSHEET: 0,
}


def com_available() -> bool:
    return win32com is not None


class ComHost(AutomationHost):
    """Drives Word, PowerPoint or Excel through a dedicated COM instance."""

    backend = "com"

    def __init__(self, doc_type: DocumentType) -> None:
        super().__init__(doc_type)
        self._app: Any = None

    @property
    def pdf_format(self) -> int:
        return _PDF_FORMATS[self.doc_type]

    def start(self) -> None:
        if win32com is None:
            raise AutomationFailure(
                self.backend, "start", RuntimeError("pywin32 is not installed")
            )
        with self._com_errors("start"):
            # DispatchEx: a fresh process, never a user's running instance
            self._app = win32com.client.DispatchEx(_PROG_IDS[self.doc_type])
            # PowerPoint refuses to hide its application window
            if self.doc_type is not DocumentType.PRESENTATION:
                self._app.Visible = False
                self._app.DisplayAlerts = False

    def open_document(self, path: Path, options: OpenOptions) -> Any:
        app = self._require_app("open")
        with self._com_errors("open"):
            if self.doc_type is DocumentType.WORD:
                doc = app.Documents.Open(str(path))
                if options.auto_hyphenation:
                    doc.AutoHyphenation = True
                return doc

            if self.doc_type is DocumentType.PRESENTATION:
                return app.Presentations.Open(
                    str(path),
                    ReadOnly=options.read_only,
                    Untitled=options.untitled,
                    WithWindow=options.with_window,
                )

            workbook = app.Workbooks.Open(str(path))
            if options.fit_to_single_page:
                for sheet in workbook.Sheets:
                    _fit_to_single_page(sheet)
            return workbook

    def export_pdf(self, handle: Any, output_path: Path) -> None:
        self._require_app("export")
        with self._com_errors("export"):
            if self.doc_type is DocumentType.SPREADSHEET:
                handle.ExportAsFixedFormat(self.pdf_format, str(output_path))
            elif self.doc_type is DocumentType.WORD:
                handle.SaveAs(str(output_path), FileFormat=self.pdf_format)
            else:
                handle.SaveAs(str(output_path), self.pdf_format)

    def close_document(self, handle: Any) -> None:
        self._require_app("close")
        with self._com_errors("close"):
            if self.doc_type is DocumentType.PRESENTATION:
                handle.Close()
            else:
                handle.Close(SaveChanges=False)

    def terminate(self) -> None:
        if self._app is None:
            return
        app, self._app = self._app, None
        try:
            app.Quit()
        except pywintypes.com_error:
            logger.warning(
                "Failed to quit %s", _PROG_IDS[self.doc_type], exc_info=True
            )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_app(self, operation: str) -> Any:
        if self._app is None:
            raise AutomationFailure(
                self.backend, operation, RuntimeError("host session not started")
            )
        return self._app

    @contextmanager
    def _com_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except pywintypes.com_error as e:
            raise AutomationFailure(self.backend, operation, e) from e


def _fit_to_single_page(sheet: Any) -> None:
    """Print a sheet one page wide and tall; chart sheets without these settings are left alone."""
    setup = sheet.PageSetup
    try:
        setup.Zoom = False
        setup.FitToPagesWide = 1
        setup.FitToPagesTall = 1
    except pywintypes.com_error:
        logger.debug("Sheet %s has no fit-to-page settings", sheet.Name)
