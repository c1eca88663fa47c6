"""Output formatters for an analysis result: text and JSON."""

import json
from typing import Callable

from callflow_analyzer.models import AnalysisResult


def format_text(result: AnalysisResult) -> str:
    """Numbered, human-readable flow; the last step is marked [end]."""
    lines = [f"Call ID: {result.call_id}"]
    if not result.events:
        lines.append("  (no routing events)")
        return "\n".join(lines)

    last = len(result.events)
    for i, event in enumerate(result.events, start=1):
        marker = " [end]" if i == last else ""
        lines.append(f"  {i}. {event.event_label.value} ({event.destination}){marker}")
    return "\n".join(lines)


def format_json(result: AnalysisResult) -> str:
    """Same shape as the HTTP response body."""
    return json.dumps(result.to_dict(), indent=2)


def get_formatter(output_format: str = "text") -> Callable[[AnalysisResult], str]:
    if output_format == "json":
        return format_json
    return format_text
