"""First pass: find the call identifier for a dialed phone number."""

import logging
from typing import Iterable

from callflow_analyzer.errors import LogSourceError
from callflow_analyzer.matchers import find_call_id

logger = logging.getLogger(__name__)


def resolve_call_id(phone_number: str, lines: Iterable[str],
                    errors: list | None = None) -> str | None:
    """Return the call id from the last line mentioning *phone_number*.

    Every line containing the number overwrites the previous candidate if
    it carries a call id, so the most recent call wins. Read failures are
    logged, appended to *errors* when given, and end the scan with
    whatever was found up to that point.

    An empty *phone_number* deliberately returns None without scanning:
    every line contains the empty string, so it would pick whichever call
    happened to be logged last.
    """
    if not phone_number:
        return None

    call_id = None
    try:
        for line in lines:
            if phone_number not in line:
                continue
            found = find_call_id(line)
            if found:
                call_id = found
    except LogSourceError as e:
        logger.warning("Call id lookup for %s stopped early: %s", phone_number, e)
        if errors is not None:
            errors.append(e)

    return call_id
