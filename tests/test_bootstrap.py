import io
import json

from ampy_diag import DiagLogLevel, diag, init, shutdown
from ampy_diag.logging import JsonDiagLogger
from ampy_diag.types import log_level_from_string

from conftest import make_logger


def test_init_installs_json_logger(clean_global, monkeypatch):
    monkeypatch.delenv("OTEL_LOG_LEVEL", raising=False)
    buf = io.StringIO()
    assert init(logger=JsonDiagLogger(buf)) is True
    diag.debug("hidden")
    diag.info("shown")
    shutdown()
    diag.info("after shutdown")
    recs = [json.loads(line) for line in buf.getvalue().splitlines()]
    assert [r["message"] for r in recs] == ["shown"]


def test_init_reads_level_from_env(clean_global, monkeypatch, logger):
    monkeypatch.setenv("OTEL_LOG_LEVEL", "error")
    init(logger=logger)
    diag.warn("no")
    diag.error("yes")
    logger.warn.assert_not_called()
    logger.error.assert_called_once_with("yes")


def test_explicit_level_beats_env(clean_global, monkeypatch, logger):
    monkeypatch.setenv("OTEL_LOG_LEVEL", "none")
    init(DiagLogLevel.INFO, logger=logger)
    diag.info("yes")
    logger.info.assert_called_once_with("yes")


def test_init_twice_can_suppress_warning(clean_global):
    first, second = make_logger(), make_logger()
    init(logger=first)
    init(logger=second, suppress_override_message=True)
    first.warn.assert_not_called()
    second.warn.assert_not_called()


def test_shutdown_without_init(clean_global):
    shutdown()
    assert clean_global.get_global("diag") is None


def test_log_level_from_string():
    assert log_level_from_string("debug") is DiagLogLevel.DEBUG
    assert log_level_from_string(" Warning ") is DiagLogLevel.WARN
    assert log_level_from_string("ALL") is DiagLogLevel.ALL
    assert log_level_from_string("bogus") is DiagLogLevel.INFO
    assert log_level_from_string(None, DiagLogLevel.ERROR) is DiagLogLevel.ERROR
