"""Tests for callflow_analyzer/formatter.py"""

import json

from callflow_analyzer.classifier import EventLabel
from callflow_analyzer.formatter import format_json, format_text, get_formatter
from callflow_analyzer.models import AnalysisResult, CallEvent

CALL_ID = "3f2a9c1e-7b4d-4e0a-9c51-0d6e2b8f1a47"


def _result(*destinations_and_labels):
    events = tuple(
        CallEvent(event_label=label, destination=d, raw_log=f"Transfer a to XML[{d}@default]")
        for d, label in destinations_and_labels
    )
    return AnalysisResult(phone_number="5551234", call_id=CALL_ID, events=events)


class TestFormatText:
    def test_numbered_steps_with_end_marker(self):
        text = format_text(_result(
            (801, EventLabel.TIME_CONDITION),
            (250, EventLabel.EXTENSION),
        ))
        assert text.split("\n") == [
            f"Call ID: {CALL_ID}",
            "  1. Time Condition Applied (801)",
            "  2. Call Routed to an Extension (250) [end]",
        ]

    def test_single_event_is_end(self):
        text = format_text(_result((601, EventLabel.IVR)))
        assert text.endswith("1. Call Passed Through an IVR (601) [end]")

    def test_no_events(self):
        text = format_text(_result())
        assert "(no routing events)" in text


class TestFormatJson:
    def test_matches_wire_form(self):
        result = _result((401, EventLabel.RING_GROUP))
        data = json.loads(format_json(result))
        assert data == {
            "callId": CALL_ID,
            "callFlow": [{
                "event": "Call Sent to Ring Group",
                "destination": 401,
                "log": "Transfer a to XML[401@default]",
            }],
        }


class TestGetFormatter:
    def test_json(self):
        assert get_formatter("json") is format_json

    def test_default_text(self):
        assert get_formatter() is format_text
