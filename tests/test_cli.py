"""Tests for the pdfsweep command line."""

import io
import json
import logging

import pytest
from typer.testing import CliRunner

from pdfsweep.cli import app
from pdfsweep.config.models import PdfSweepConfig
from pdfsweep.log import configure_logging

from conftest import FakeHostFactory

runner = CliRunner()


@pytest.fixture
def cli_hosts(isolated_config, monkeypatch):
    """Route the CLI's host creation to a recording fake."""
    factory = FakeHostFactory()
    monkeypatch.setattr(
        "pdfsweep.cli.create_host", lambda doc_type, config: factory(doc_type)
    )
    return factory


def test_default_run(sample_root, cli_hosts):
    result = runner.invoke(app, [str(sample_root)])
    assert result.exit_code == 0, result.output
    assert sorted(cli_hosts.exported()) == ["a.docx", "c.xlsx"]
    assert "CONVERTING:" in result.output
    assert "CONVERTED:" in result.output
    assert "Converted 2 file(s)" in result.output


def test_force_flag(sample_root, cli_hosts):
    result = runner.invoke(app, [str(sample_root), "--force"])
    assert result.exit_code == 0, result.output
    assert sorted(cli_hosts.exported()) == ["a.docx", "b.pptx", "c.xlsx"]


def test_short_force_flag(sample_root, cli_hosts):
    result = runner.invoke(app, [str(sample_root), "-f"])
    assert result.exit_code == 0, result.output
    assert len(cli_hosts.exported()) == 3


def test_defaults_to_current_directory(sample_root, cli_hosts, monkeypatch):
    monkeypatch.chdir(sample_root)
    result = runner.invoke(app, [])
    assert result.exit_code == 0, result.output
    assert sorted(cli_hosts.exported()) == ["a.docx", "c.xlsx"]


def test_noop_exits_zero(tmp_path, cli_hosts):
    empty = tmp_path / "empty"
    empty.mkdir()
    result = runner.invoke(app, [str(empty)])
    assert result.exit_code == 0, result.output
    assert "Nothing to convert" in result.output
    assert cli_hosts.hosts == []


def test_second_run_is_noop(sample_root, cli_hosts):
    runner.invoke(app, [str(sample_root)])
    result = runner.invoke(app, [str(sample_root)])
    assert result.exit_code == 0, result.output
    assert "Nothing to convert" in result.output
    assert len(cli_hosts.exported()) == 2


def test_conversion_failure_exits_nonzero(sample_root, isolated_config, monkeypatch):
    factory = FakeHostFactory(fail_on="c.xlsx")
    monkeypatch.setattr(
        "pdfsweep.cli.create_host", lambda doc_type, config: factory(doc_type)
    )
    result = runner.invoke(app, [str(sample_root)])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "cannot open" in result.output
    assert "1 file(s) converted before the failure" in result.output
    assert all(h.terminated for h in factory.hosts)


def test_missing_root_exits_nonzero(tmp_path, cli_hosts):
    result = runner.invoke(app, [str(tmp_path / "nope")])
    assert result.exit_code == 1
    assert "Not a directory" in result.output


def test_bad_config_exits_nonzero(sample_root, cli_hosts, tmp_path):
    (tmp_path / "pdfsweep.yaml").write_text("log_level: loud\n")
    result = runner.invoke(app, [str(sample_root)])
    assert result.exit_code == 1
    assert "Invalid config" in result.output
    assert cli_hosts.hosts == []


def test_config_from_env_var(sample_root, cli_hosts, tmp_path, monkeypatch):
    cfg = tmp_path / "alt.yaml"
    cfg.write_text("log_format: json\n")
    monkeypatch.setenv("PDFSWEEP_CONFIG", str(cfg))
    result = runner.invoke(app, [str(sample_root)])
    assert result.exit_code == 0, result.output
    lines = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
    assert any(line["message"].startswith("CONVERTING: ") for line in lines)


# ---------------------------------------------------------------------------
# configure_logging
# ---------------------------------------------------------------------------


class TestConfigureLogging:
    def test_text_format_is_bare_message(self):
        stream = io.StringIO()
        configure_logging(PdfSweepConfig(), stream=stream)
        logging.getLogger("pdfsweep.test").info("CONVERTING: %s", "x.docx")
        assert stream.getvalue() == "CONVERTING: x.docx\n"

    def test_json_format(self):
        stream = io.StringIO()
        configure_logging(PdfSweepConfig(log_format="json"), stream=stream)
        logging.getLogger("pdfsweep.test").warning("careful")
        assert json.loads(stream.getvalue()) == {
            "level": "warning",
            "logger": "pdfsweep.test",
            "message": "careful",
        }

    def test_level_filters(self):
        stream = io.StringIO()
        configure_logging(PdfSweepConfig(log_level="warn"), stream=stream)
        logging.getLogger("pdfsweep.test").info("hidden")
        assert stream.getvalue() == ""

    def test_reconfiguring_replaces_handler(self):
        configure_logging(PdfSweepConfig(), stream=io.StringIO())
        logger = configure_logging(PdfSweepConfig(), stream=io.StringIO())
        assert len(logger.handlers) == 1
