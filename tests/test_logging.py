"""
Tests for the package-level call surface, environment bootstrap and the
bundled example scripts. All of these share one Emitter, reset per test by
the `shared_logger` fixture.
"""

import json
import os
import runpy
from pathlib import Path

import pytest

import chatty
from chatty import OutputFormat, Severity
from chatty.bootstrap import FORMAT_ENV, SEVERITY_ENV

EXAMPLES = Path(__file__).resolve().parents[1] / "python" / "examples"

pytestmark = pytest.mark.usefixtures("shared_logger")


class TestInit:
    def test_defaults_with_empty_environment(self, capsys) -> None:
        cfg = chatty.get_logger().config
        assert cfg.snapshot() == (Severity.INFO, OutputFormat.PLAIN, False)
        assert capsys.readouterr().out == ""

    def test_reads_environment(self) -> None:
        chatty.init(environ={SEVERITY_ENV: " Warn ", FORMAT_ENV: "JSON"})
        cfg = chatty.get_logger().config
        assert cfg.severity is Severity.WARNING
        assert cfg.output_format is OutputFormat.JSON

    def test_reads_os_environ_by_default(self, monkeypatch) -> None:
        monkeypatch.setenv(SEVERITY_ENV, "critical")
        monkeypatch.setenv(FORMAT_ENV, "json")
        chatty.init()
        assert chatty.get_logger().config.snapshot()[:2] == (Severity.FATAL, OutputFormat.JSON)

    def test_unknown_format_means_plain(self) -> None:
        chatty.init(environ={FORMAT_ENV: "yaml"})
        assert chatty.get_logger().config.output_format is OutputFormat.PLAIN

    @pytest.mark.parametrize("raw, message", [("xyz", "unknown severity level xyz"), ("", "empty severity level")])
    def test_bad_severity_reported_and_defaults_to_info(self, capsys, raw: str, message: str) -> None:
        chatty.init(environ={SEVERITY_ENV: raw, FORMAT_ENV: "json"})
        assert chatty.get_logger().config.severity is Severity.INFO
        rec = json.loads(capsys.readouterr().out)
        assert rec["level"] == "error"
        assert rec["msg"] == message


class TestModuleFunctions:
    def test_delegate_to_shared_logger(self, capsys) -> None:
        chatty.info("database connected")
        assert capsys.readouterr().out.endswith("\tinfo\tdatabase connected\n")
        assert chatty.last_record().endswith("\tinfo\tdatabase connected\n")
        assert chatty.last_record() == chatty.get_logger().last_record()

    def test_threshold_applies(self, capsys) -> None:
        chatty.set_severity_level("error")
        chatty.debug("a")
        chatty.debugf("%s", "b")
        chatty.info_kv("c", {"k": 1})
        chatty.warn("d", k=1)
        assert capsys.readouterr().out == ""
        chatty.error_kv("failed", {"code": 500, "user": 42})
        assert capsys.readouterr().out.endswith("\terror\tfailed,\tcode=500,\tuser=42\n")

    def test_json_surface(self, capsys) -> None:
        chatty.set_output_format("json")
        chatty.set_escape_json(True)
        chatty.warnf('blocking user %d for "too many" attempts', 10)
        rec = json.loads(capsys.readouterr().out)
        assert rec == {"ts": rec["ts"], "level": "warning", "msg": 'blocking user 10 for "too many" attempts'}

    def test_emit(self, capsys) -> None:
        chatty.emit(Severity.ERROR, "evt", {"branch": "münch", "code": 1588})
        assert capsys.readouterr().out.endswith("\terror\tevt,\tbranch=münch,\tcode=1588\n")

    def test_error_exc_variants(self, capsys) -> None:
        err = RuntimeError("this is an example error")
        chatty.error_exc(None)
        assert capsys.readouterr().out == ""
        assert chatty.error_exc_return(err) is err
        chatty.errorf("error querying user %d investments: %s", 10, err)
        out = capsys.readouterr().out.splitlines()
        assert out[0].endswith("\terror\tthis is an example error")
        assert out[1].endswith("\terror\terror querying user 10 investments: this is an example error")

    @pytest.mark.parametrize(
        "call",
        [
            lambda: chatty.fatal("boom"),
            lambda: chatty.fatalf("%s", "boom"),
            lambda: chatty.fatal_kv("boom", {"k": 1}),
            lambda: chatty.fatal_exc(RuntimeError("boom")),
        ],
    )
    def test_fatal_variants_exit(self, capsys, call) -> None:
        with pytest.raises(SystemExit) as exc:
            call()
        assert exc.value.code == 1
        assert "\tcritical\tboom" in capsys.readouterr().out


class TestGlobalSetters:
    def test_export_environment(self, monkeypatch) -> None:
        monkeypatch.setenv(SEVERITY_ENV, "info")
        monkeypatch.setenv(FORMAT_ENV, "plain")
        chatty.set_global_severity_level("verb")
        chatty.set_global_output_format("json")
        assert os.environ[SEVERITY_ENV] == "debug"
        assert os.environ[FORMAT_ENV] == "json"
        assert chatty.get_logger().config.snapshot()[:2] == (Severity.DEBUG, OutputFormat.JSON)

    def test_accept_enums(self, monkeypatch) -> None:
        monkeypatch.setenv(SEVERITY_ENV, "info")
        monkeypatch.setenv(FORMAT_ENV, "plain")
        chatty.set_global_severity_level(Severity.FATAL)
        chatty.set_global_output_format(OutputFormat.PLAIN)
        assert os.environ[SEVERITY_ENV] == "fatal"
        assert os.environ[FORMAT_ENV] == "plain"

    def test_invalid_values_reported_and_ignored(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv(SEVERITY_ENV, "info")
        monkeypatch.setenv(FORMAT_ENV, "plain")
        chatty.set_global_severity_level("nope")
        chatty.set_global_output_format("xml")
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].endswith("\terror\tunknown severity level nope")
        assert lines[1].endswith("\terror\tunknown format given: xml")
        assert os.environ[SEVERITY_ENV] == "info"
        assert os.environ[FORMAT_ENV] == "plain"
        assert chatty.get_logger().config.snapshot()[:2] == (Severity.INFO, OutputFormat.PLAIN)


class TestExamples:
    def test_plain_demo(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv(SEVERITY_ENV, "info")
        monkeypatch.setenv(FORMAT_ENV, "plain")
        runpy.run_path(str(EXAMPLES / "plain_demo.py"), run_name="__main__")
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 11
        assert lines[0].endswith("\tdebug\tthis message appears if the level was defined as debug")
        assert lines[-1] == lines[-2]
        assert lines[-1].endswith(",\tbranch=münch,\tcode=1588,\terror=this is an example error")

    def test_json_demo(self, capsys) -> None:
        runpy.run_path(str(EXAMPLES / "json_demo.py"), run_name="__main__")
        lines = capsys.readouterr().out.splitlines()
        assert json.loads(lines[0])["details"] == {"count": 42, "dry_run": False, "venue": "alpaca"}
        with pytest.raises(json.JSONDecodeError):
            json.loads(lines[1])
        assert json.loads(lines[2])["msg"] == 'symbol "AAPL" halted'
        assert lines[3].startswith("parsed back: symbol \"AAPL\" halted")
