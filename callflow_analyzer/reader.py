"""Generator-based reading of the switch log, re-opened on every scan."""

import logging
import os
from typing import Iterator

from callflow_analyzer.errors import LogUnavailable, ReadFailure

logger = logging.getLogger(__name__)


class LogFile:
    """Iterable over the lines of a log file.

    Each call to ``iter()`` opens the file again and yields its lines from
    the start, decoded as UTF-8 with CR, LF and CRLF all treated as line
    terminators. Bytes that are not valid UTF-8 come through as U+FFFD
    and the scan carries on. Yielded lines never carry the terminator.

    Raises LogUnavailable from ``iter()`` if the file is missing, and
    ReadFailure mid-iteration (after the lines read so far) for any other
    read error.
    """

    def __init__(self, path: str):
        self.path = path

    def available(self) -> bool:
        return os.path.isfile(self.path)

    def __iter__(self) -> Iterator[str]:
        if not self.available():
            raise LogUnavailable(self.path)
        return self._scan()

    def _scan(self) -> Iterator[str]:
        try:
            # newline=None translates \r and \r\n to \n
            f = open(self.path, "r", encoding="utf-8", errors="replace", newline=None)
        except OSError as e:
            raise ReadFailure(self.path, e.strerror or str(e)) from e

        logger.debug("Scanning %s", self.path)
        with f:
            try:
                for line in f:
                    yield line.rstrip("\n")
            except OSError as e:
                raise ReadFailure(self.path, e.strerror or str(e)) from e

    def __repr__(self) -> str:
        return f"LogFile({self.path!r})"


def read_lines(path: str) -> Iterator[str]:
    """Yield each line of the log at *path*, in file order."""
    return iter(LogFile(path))
