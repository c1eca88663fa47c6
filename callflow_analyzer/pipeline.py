"""Two-pass analysis: phone number -> call id -> ordered routing events."""

import logging

from callflow_analyzer.extractor import extract_call_flow
from callflow_analyzer.models import AnalysisResult
from callflow_analyzer.reader import LogFile
from callflow_analyzer.resolver import resolve_call_id

logger = logging.getLogger(__name__)


class CallFlowAnalyzer:
    """Answers phone-number queries against one log file.

    Holds no per-query state: each ``analyze`` call scans the log twice,
    once to resolve the call id and once to collect its events, so one
    analyzer can serve concurrent requests.
    """

    def __init__(self, log_file: str):
        self._log = LogFile(log_file)

    @property
    def log_file(self) -> str:
        return self._log.path

    def log_available(self) -> bool:
        return self._log.available()

    def analyze(self, phone_number: str) -> AnalysisResult:
        errors: list = []

        call_id = resolve_call_id(phone_number, self._log, errors)
        if call_id is None:
            logger.info("No call found for %s", phone_number)
            return AnalysisResult(phone_number=phone_number, errors=tuple(errors))

        events = extract_call_flow(call_id, self._log, errors)
        logger.info("Phone %s -> call %s (%d events)", phone_number, call_id, len(events))
        return AnalysisResult(
            phone_number=phone_number,
            call_id=call_id,
            events=tuple(events),
            errors=tuple(errors),
        )
