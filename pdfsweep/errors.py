"""Exception types shared across pdfsweep."""

from __future__ import annotations

from pathlib import Path


class PdfSweepError(Exception):
    """Base class for pdfsweep errors."""


class InvalidPathError(PdfSweepError, ValueError):
    """A file path does not live under the scan root."""

    def __init__(self, root: Path, path: Path) -> None:
        self.root = root
        self.path = path
        super().__init__(f"{path} is not under {root}")


class ScanAccessError(PdfSweepError):
    """A directory could not be listed during a scan."""

    def __init__(self, path: str | Path | None, cause: OSError) -> None:
        self.path = path
        super().__init__(f"Cannot list {path}: {cause}")
        self.__cause__ = cause


class AutomationFailure(PdfSweepError):
    """Wraps backend-specific errors from the office automation host."""

    def __init__(self, backend: str, operation: str, cause: Exception) -> None:
        self.backend = backend
        self.operation = operation
        super().__init__(f"{backend} {operation} failed: {cause}")
        self.__cause__ = cause
