import os

import pytest

SAMPLE_LOG = os.path.join(os.path.dirname(__file__), "..", "logs", "sample.log")

# Call ids used in logs/sample.log
OLD_CALL_ID = "0f1e2d3c-4b5a-6978-8796-a5b4c3d2e1f0"
NEW_CALL_ID = "3f2a9c1e-7b4d-4e0a-9c51-0d6e2b8f1a47"
OTHER_CALL_ID = "c0ffee00-1234-5678-9abc-def012345678"


@pytest.fixture
def sample_log():
    return os.path.abspath(SAMPLE_LOG)


@pytest.fixture
def write_log(tmp_path):
    """Return a helper that writes lines to a log file and returns its path."""

    def _write(lines, name="switch.log", newline="\n"):
        path = tmp_path / name
        text = "".join(line + newline for line in lines)
        path.write_bytes(text.encode("utf-8"))
        return str(path)

    return _write
