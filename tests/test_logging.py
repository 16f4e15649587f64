import json
import logging

from app.core.logging import StructuredLogger, build_formatter


class Unencodable:
    def __str__(self):
        return "unencodable"


def _format(logger_name: str, payload: dict) -> dict:
    record = logging.getLogger(logger_name).makeRecord(
        logger_name, logging.ERROR, __file__, 1, payload, None, None
    )
    line = build_formatter().format(record)
    assert "\n" not in line
    return json.loads(line)


def test_formatter_merges_payload_into_one_json_object():
    entry = _format(
        "app.sessions",
        {"name": "TooManyRequestsError", "context": {"type": "sessions"}},
    )
    assert entry["name"] == "TooManyRequestsError"
    assert entry["context"]["type"] == "sessions"
    assert entry["logger"] == "app.sessions"
    assert entry["level"] == "ERROR"
    assert "timestamp" in entry


def test_formatter_renders_unknown_values_with_str():
    assert _format("app.sessions", {"value": Unencodable()})["value"] == "unencodable"


def test_log_passes_payload_as_dict_message(caplog):
    sink = StructuredLogger(logging.getLogger("tests.structured"))
    with caplog.at_level(logging.ERROR, logger="tests.structured"):
        sink.error({"name": "TooManyRequestsError"})

    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.ERROR
    assert caplog.records[0].msg == {"name": "TooManyRequestsError"}


def test_log_below_threshold_is_dropped(caplog):
    sink = StructuredLogger(logging.getLogger("tests.structured"))
    with caplog.at_level(logging.WARNING, logger="tests.structured"):
        sink.info({"name": "ForbiddenError"})

    assert caplog.records == []
