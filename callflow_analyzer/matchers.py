"""Compiled patterns for the two things pulled out of a log line."""

import re

# UUID-shaped call identifier, e.g. 3f2a9c1e-7b4d-4e0a-9c51-0d6e2b8f1a47
CALL_ID_PATTERN = re.compile(r"([a-f0-9-]{36})", re.IGNORECASE)

# Dialplan transfer marker, e.g. "Transfer sofia/... to XML[250@default]"
TRANSFER_PATTERN = re.compile(r"Transfer .*? to XML\[(\d+)@")


def find_call_id(line: str) -> str | None:
    """Return the first call-id token on the line, or None."""
    match = CALL_ID_PATTERN.search(line)
    if not match:
        return None
    return match.group(1)


def find_destination(line: str) -> int | None:
    """Return the transfer destination number on the line, or None."""
    match = TRANSFER_PATTERN.search(line)
    if not match:
        return None
    return int(match.group(1), 10)
