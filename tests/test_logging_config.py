"""Tests for the log formatters."""

import json
import logging

from workbook_app.middleware.logging_config import JSONFormatter, ReadableFormatter


def _record(**extra):
    record = logging.LogRecord("workbook_app.services", logging.INFO, __file__, 1, "Step saved", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_carries_record_keys():
    entry = json.loads(JSONFormatter().format(_record(workbook_id=7, event_type="step_saved", nav="next")))
    assert entry["message"] == "Step saved"
    assert entry["workbook_id"] == 7
    assert entry["event_type"] == "step_saved"
    assert "nav" not in entry


def test_readable_suffix_names_workbook_and_request():
    line = ReadableFormatter().format(_record(workbook_id=7, request_id="abc123"))
    assert line.endswith("Step saved [wb=7 req=abc123]")
    assert ReadableFormatter().format(_record()).endswith("Step saved")
