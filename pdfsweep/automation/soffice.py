"""LibreOffice headless conversion via the soffice command line."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from pdfsweep.automation.base import AutomationHost
from pdfsweep.automation.models import OpenOptions
from pdfsweep.errors import AutomationFailure
from pdfsweep.scanner.models import DocumentType

logger = logging.getLogger(__name__)

_EXECUTABLES = ("soffice", "libreoffice")

_PDF_FILTERS: dict[DocumentType, str] = {
    DocumentType.WORD: "writer_pdf_Export",
    DocumentType.PRESENTATION: "impress_pdf_Export",
    DocumentType.SPREADSHEET: "calc_pdf_Export",
}


@dataclass(frozen=True)
class SofficeDocument:
    """Handle for a document queued for soffice conversion."""

    path: Path
    options: OpenOptions


class SofficeHost(AutomationHost):
    """Runs one headless soffice conversion per document.

    The session is the resolved soffice executable; each export is a
    blocking subprocess that exits when its document is written.
    """

    backend = "soffice"

    def __init__(
        self,
        doc_type: DocumentType,
        binary: str | None = None,
        timeout: int | None = None,
    ) -> None:
        super().__init__(doc_type)
        self._binary_hint = binary
        self._timeout = timeout
        self._binary: str | None = None

    @property
    def pdf_format(self) -> str:
        return _PDF_FILTERS[self.doc_type]

    def start(self) -> None:
        candidates = (self._binary_hint,) if self._binary_hint else _EXECUTABLES
        for name in candidates:
            found = shutil.which(name)
            if found:
                self._binary = found
                logger.debug("Using %s for %s documents", found, self.doc_type.value)
                return
        raise AutomationFailure(
            self.backend,
            "start",
            FileNotFoundError(f"LibreOffice not found (tried: {', '.join(candidates)})"),
        )

    def open_document(self, path: Path, options: OpenOptions) -> SofficeDocument:
        if self._binary is None:
            raise AutomationFailure(
                self.backend, "open", RuntimeError("host session not started")
            )
        path = Path(path)
        if not path.is_file():
            raise AutomationFailure(
                self.backend, "open", FileNotFoundError(f"File not found: {path}")
            )
        if options.auto_hyphenation:
            # soffice --convert-to has no hyphenation switch
            logger.debug(
                "Automatic hyphenation not supported by soffice; keeping %s as authored",
                path,
            )
        return SofficeDocument(path=path, options=options)

    def export_pdf(self, handle: SofficeDocument, output_path: Path) -> None:
        output_path = Path(output_path)
        before = _mtime(output_path)
        cmd = [
            self._binary,
            "--headless",
            "--nologo",
            "--nolockcheck",
            "--norestore",
            "--convert-to",
            self._convert_target(handle.options),
            "--outdir",
            str(output_path.parent),
            str(handle.path),
        ]
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=self._timeout
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise AutomationFailure(self.backend, "export", e) from e

        if result.returncode != 0:
            raise AutomationFailure(
                self.backend,
                "export",
                RuntimeError(
                    f"soffice exited {result.returncode}: {result.stderr[:200]}"
                ),
            )

        after = _mtime(output_path)
        if after is None or after == before:
            raise AutomationFailure(
                self.backend,
                "export",
                FileNotFoundError(f"PDF not created: {output_path}"),
            )

    def close_document(self, handle: SofficeDocument) -> None:
        # Nothing stays open between soffice runs
        return None

    def terminate(self) -> None:
        self._binary = None

    def _convert_target(self, options: OpenOptions) -> str:
        target = f"pdf:{self.pdf_format}"
        if options.fit_to_single_page:
            target += ":" + json.dumps(
                {"SinglePageSheets": {"type": "boolean", "value": "true"}}
            )
        return target


def _mtime(path: Path) -> int | None:
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None
