"""Second pass: replay the log and collect the routing events of one call."""

import logging
from typing import Iterable

from callflow_analyzer.classifier import classify
from callflow_analyzer.errors import LogSourceError
from callflow_analyzer.matchers import find_destination
from callflow_analyzer.models import CallEvent

logger = logging.getLogger(__name__)


def event_from_line(line: str) -> CallEvent | None:
    """Build a CallEvent from a transfer line, or None if it has none."""
    destination = find_destination(line)
    if destination is None:
        return None
    return CallEvent(
        event_label=classify(destination),
        destination=destination,
        raw_log=line.strip(),
    )


def extract_call_flow(call_id: str, lines: Iterable[str],
                      errors: list | None = None) -> list[CallEvent]:
    """Return the routing events for *call_id* in log order.

    A line is handled only the first time its exact text is seen; later
    identical lines are dropped. Every handled line is remembered, whether
    or not it produced an event.
    """
    events: list[CallEvent] = []
    seen: set[str] = set()

    try:
        for line in lines:
            if call_id not in line or line in seen:
                continue
            seen.add(line)
            event = event_from_line(line)
            if event is not None:
                events.append(event)
    except LogSourceError as e:
        logger.warning("Call flow scan for %s stopped early: %s", call_id, e)
        if errors is not None:
            errors.append(e)

    logger.debug("Call %s: %d matching lines, %d events", call_id, len(seen), len(events))
    return events
