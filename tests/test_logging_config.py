import json
import logging

from wireframe_drafter.logging_config import StructuredFormatter, get_trace_id, set_trace_id


def make_record(**extra):
    record = logging.LogRecord("wireframe_drafter.parser", logging.INFO, __file__, 10, "Parsed %s", ("page",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_formatter_emits_extra_fields():
    payload = json.loads(StructuredFormatter().format(make_record(layout="dashboard", components_count=4)))

    assert payload["message"] == "Parsed page"
    assert payload["severity"] == "INFO"
    assert payload["logger"] == "wireframe_drafter.parser"
    assert payload["layout"] == "dashboard"
    assert payload["components_count"] == 4
    assert "args" not in payload


def test_structured_formatter_includes_trace_id():
    set_trace_id("trace-123")
    try:
        payload = json.loads(StructuredFormatter().format(make_record()))
    finally:
        set_trace_id(None)

    assert payload["logging.googleapis.com/trace"] == "trace-123"
    assert get_trace_id() is None
