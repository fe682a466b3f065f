"""Top-level conversion run: scan, filter, and convert each document type."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from pdfsweep.automation import HostFactory, create_host
from pdfsweep.config.models import PdfSweepConfig
from pdfsweep.converter.converter import TypeConverter
from pdfsweep.scanner.filter import filter_candidates, partition
from pdfsweep.scanner.models import ConversionTask, DocumentType
from pdfsweep.scanner.scanner import scan

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Outcome of a conversion run."""

    converted: list[ConversionTask] = field(default_factory=list)
    skipped: int = 0  # candidates that already had a PDF

    @property
    def counts(self) -> dict[DocumentType, int]:
        totals = {t: 0 for t in DocumentType}
        for task in self.converted:
            totals[task.record.doc_type] += 1
        return totals


class ConversionRunner:
    """Scans a folder and converts pending documents, one host per type."""

    def __init__(self, host_factory: HostFactory) -> None:
        self._host_factory = host_factory
        self.summary = RunSummary()

    def run(self, root: str | Path, force_recompile: bool = False) -> RunSummary:
        """Convert every document under root that lacks a PDF (or all, if forced).

        ``self.summary`` is updated as files finish, so it still reflects
        partial progress if a converter raises.
        """
        root = Path(root).resolve()
        self.summary = RunSummary()
        logger.info("Scanning %s", root)

        scanned = scan(root)
        pending = filter_candidates(
            scanned.candidates, scanned.existing_pdf_keys, force_recompile
        )
        self.summary.skipped = len(scanned.candidates) - len(pending)

        if not pending:
            logger.info("Nothing to convert")
            return self.summary

        for doc_type, files in partition(pending).items():
            if not files:
                continue
            converter = TypeConverter(
                doc_type, self._host_factory, completed=self.summary.converted
            )
            converter.convert(files, root)

        return self.summary


def run(
    root: str | Path,
    force_recompile: bool = False,
    config: PdfSweepConfig | None = None,
) -> RunSummary:
    """Convenience wrapper: run with hosts built from config."""
    config = config or PdfSweepConfig()
    runner = ConversionRunner(partial(create_host, config=config.automation))
    return runner.run(root, force_recompile)
