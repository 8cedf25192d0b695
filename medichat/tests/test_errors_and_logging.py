import json
import logging
import sys

from medichat import settings
from medichat.utils.exceptions import InvalidRequestError, MedichatError, status_to_code
from medichat.utils.logging_utils import LOGGER_NAME, JsonFormatter, configure_logging
from medichat.utils.tracing import new_trace_id


def test_status_to_code():
    assert status_to_code(400) == "BAD_REQUEST"
    assert status_to_code(422) == "UNPROCESSABLE_ENTITY"
    assert status_to_code(500) == "INTERNAL_SERVER_ERROR"
    assert status_to_code(418) == "HTTP_418"


def test_envelope_carries_trace_id():
    trace_id = new_trace_id()
    body = InvalidRequestError("Symptoms are required").to_envelope()
    assert body == {"code": "BAD_REQUEST", "message": "Symptoms are required", "trace_id": trace_id}


def test_envelope_details_and_status_override():
    err = MedichatError("bad", details=[{"loc": ["age"]}], status_code=422)
    body = err.to_envelope()
    assert body["code"] == "UNPROCESSABLE_ENTITY"
    assert body["details"] == [{"loc": ["age"]}]
    assert body["trace_id"] == ""


def _record(msg, exc_info=None):
    return logging.LogRecord(LOGGER_NAME, logging.INFO, __file__, 1, msg, None, exc_info, func="build_context")


def test_json_formatter_fields():
    trace_id = new_trace_id()
    out = json.loads(JsonFormatter().format(_record({"function": "build_context", "urgency": "low"})))
    assert out["level"] == "INFO"
    assert out["function"] == "build_context"
    assert out["trace_id"] == trace_id
    assert "'urgency': 'low'" in out["message"]
    assert out["timestamp"].endswith("Z")


def test_json_formatter_without_trace_and_with_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        out = json.loads(JsonFormatter().format(_record("failed", exc_info=sys.exc_info())))
    assert out["trace_id"] is None
    assert "ValueError: boom" in out["exc_info"]


def test_configure_logging_is_idempotent(monkeypatch):
    monkeypatch.setenv("MEDICHAT_LOG_LEVEL", "INFO")
    logger = logging.getLogger(LOGGER_NAME)
    before = list(logger.handlers)
    try:
        configure_logging("DEBUG")
        configure_logging()
        json_handlers = [h for h in logger.handlers if isinstance(h.formatter, JsonFormatter)]
        assert len(json_handlers) == 1
        assert logger.level == logging.INFO
    finally:
        for h in logger.handlers[:]:
            if h not in before:
                logger.removeHandler(h)


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MEDICHAT_LOG_LEVEL", " debug ")
    assert settings.log_level() == "DEBUG"
    monkeypatch.delenv("CLINICAL_RULES_PATH", raising=False)
    assert settings.rules_path() == settings.DEFAULT_RULES_PATH
    monkeypatch.setenv("CLINICAL_RULES_PATH", str(tmp_path / "r.yaml"))
    assert settings.rules_path() == tmp_path / "r.yaml"
