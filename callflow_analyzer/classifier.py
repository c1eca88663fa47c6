"""Map a transfer destination number to the kind of routing it represents."""

from enum import Enum


class EventLabel(str, Enum):
    TIME_CONDITION = "Time Condition Applied"
    RING_GROUP = "Call Sent to Ring Group"
    EXTENSION = "Call Routed to an Extension"
    IVR = "Call Passed Through an IVR"
    ROUTED = "Call Routed"


# (low, high, label), both bounds inclusive. Checked in this order.
DESTINATION_RANGES: tuple[tuple[int, int, EventLabel], ...] = (
    (800, 899, EventLabel.TIME_CONDITION),
    (400, 499, EventLabel.RING_GROUP),
    (200, 399, EventLabel.EXTENSION),
    (600, 699, EventLabel.IVR),
)

DEFAULT_LABEL = EventLabel.ROUTED


def classify(destination: int) -> EventLabel:
    """Return the event label for a destination; never fails."""
    for low, high, label in DESTINATION_RANGES:
        if low <= destination <= high:
            return label
    return DEFAULT_LABEL
