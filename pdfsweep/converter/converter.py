"""Per-document-type conversion over a single automation host session."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

from pdfsweep.automation import OPEN_OPTIONS, AutomationHost, HostFactory, OpenOptions
from pdfsweep.scanner.models import ConversionTask, DocumentType, FileRecord
from pdfsweep.scanner.paths import resolve

logger = logging.getLogger(__name__)


@contextmanager
def host_session(host: AutomationHost) -> Iterator[AutomationHost]:
    """Start a host and terminate it on every exit path."""
    try:
        host.start()
        yield host
    finally:
        host.terminate()


class TypeConverter:
    """Converts one batch of same-type documents to PDF.

    Fails fast: the first automation error aborts the rest of the batch.
    Tasks finished before the failure remain in ``completed``.
    """

    def __init__(
        self,
        doc_type: DocumentType,
        host_factory: HostFactory,
        completed: list[ConversionTask] | None = None,
    ) -> None:
        self.doc_type = doc_type
        self._host_factory = host_factory
        self.completed: list[ConversionTask] = completed if completed is not None else []

    def convert(self, files: Iterable[FileRecord], root: str | Path) -> list[ConversionTask]:
        options = OPEN_OPTIONS[self.doc_type]
        done: list[ConversionTask] = []
        with host_session(self._host_factory(self.doc_type)) as host:
            for record in files:
                if record.doc_type is not self.doc_type:
                    raise ValueError(
                        f"{record.path} is a {record.doc_type.value} document, "
                        f"not {self.doc_type.value}"
                    )
                task = self._convert_one(host, record, Path(root), options)
                done.append(task)
                self.completed.append(task)
        return done

    def _convert_one(
        self,
        host: AutomationHost,
        record: FileRecord,
        root: Path,
        options: OpenOptions,
    ) -> ConversionTask:
        logger.info("CONVERTING: %s", record.path)
        _, output_path = resolve(root, record.path)
        handle = host.open_document(record.path, options)
        try:
            host.export_pdf(handle, output_path)
        finally:
            host.close_document(handle)
        logger.info("CONVERTED: %s", output_path)
        return ConversionTask(record=record, output_path=output_path)
