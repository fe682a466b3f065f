"""Shared test fixtures for pdfsweep."""

import logging
from pathlib import Path

import pytest

from pdfsweep.automation.base import AutomationHost
from pdfsweep.config.models import PdfSweepConfig
from pdfsweep.errors import AutomationFailure


class RecordingHost(AutomationHost):
    """In-memory automation host that logs every call and writes stub PDFs."""

    backend = "fake"

    def __init__(self, doc_type, calls, fail_on=None, write_pdf=True):
        super().__init__(doc_type)
        self.calls = calls
        self.fail_on = fail_on
        self.write_pdf = write_pdf
        self.started = False
        self.terminated = False

    @property
    def pdf_format(self):
        return f"{self.doc_type.value}-pdf"

    def start(self):
        self.started = True
        self.calls.append(("start", self.doc_type))

    def open_document(self, path, options):
        self.calls.append(("open", Path(path), options))
        if self.fail_on and Path(path).name == self.fail_on:
            raise AutomationFailure(self.backend, "open", RuntimeError("cannot open"))
        return {"path": Path(path)}

    def export_pdf(self, handle, output_path):
        self.calls.append(("export", handle["path"], Path(output_path)))
        if self.write_pdf:
            Path(output_path).write_bytes(b"%PDF-1.4 stub")

    def close_document(self, handle):
        self.calls.append(("close", handle["path"]))

    def terminate(self):
        self.terminated = True
        self.calls.append(("terminate", self.doc_type))


class FakeHostFactory:
    """Host factory that hands out RecordingHosts sharing one call log."""

    def __init__(self, fail_on=None, write_pdf=True):
        self.calls = []
        self.hosts = []
        self.fail_on = fail_on
        self.write_pdf = write_pdf

    def __call__(self, doc_type):
        host = RecordingHost(
            doc_type, self.calls, fail_on=self.fail_on, write_pdf=self.write_pdf
        )
        self.hosts.append(host)
        return host

    def exported(self):
        """Names of source files that reached export, in call order."""
        return [call[1].name for call in self.calls if call[0] == "export"]


@pytest.fixture
def fake_factory():
    return FakeHostFactory()


@pytest.fixture
def sample_root(tmp_path):
    """a.docx, b.pptx (already has b.pdf), c.xlsx."""
    root = tmp_path / "docs"
    root.mkdir()
    for name in ("a.docx", "b.pptx", "b.pdf", "c.xlsx"):
        (root / name).write_bytes(b"stub")
    return root


@pytest.fixture
def sample_config():
    return PdfSweepConfig()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep load_config away from the developer's real config files."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("PDFSWEEP_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture(autouse=True)
def _reset_pdfsweep_logger():
    yield
    logger = logging.getLogger("pdfsweep")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
