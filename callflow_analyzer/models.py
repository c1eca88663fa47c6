"""Result types: frozen dataclasses with their JSON wire form."""

from dataclasses import dataclass, field

from callflow_analyzer.classifier import EventLabel
from callflow_analyzer.errors import LogSourceError


@dataclass(frozen=True)
class CallEvent:
    event_label: EventLabel
    destination: int
    raw_log: str   # source line, trimmed

    def to_dict(self) -> dict:
        return {
            "event": self.event_label.value,
            "destination": self.destination,
            "log": self.raw_log,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one phone-number query.

    ``call_id`` is None when the number could not be tied to a call
    (the not-found outcome). ``errors`` holds any log read failures seen
    during the query; they are diagnostics, not part of the answer.
    """

    phone_number: str
    call_id: str | None = None
    events: tuple[CallEvent, ...] = ()
    errors: tuple[LogSourceError, ...] = field(default=(), compare=False)

    @property
    def found(self) -> bool:
        return self.call_id is not None

    def to_dict(self) -> dict:
        return {
            "callId": self.call_id,
            "callFlow": [event.to_dict() for event in self.events],
        }
