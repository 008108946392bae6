import pytest

from datagen.clock import fixed_clock
from datagen.sinks import BaseSink

TIMESTAMP = "2024-01-01T00:00:00Z"


class RecordingSink(BaseSink):
    """In-memory sink. Fails the send attempt number `fail_on` (1-based)."""

    def __init__(self, fail_on=None, close_error=None):
        super().__init__("test-topic")
        self.fail_on = fail_on
        self.close_error = close_error
        self.attempts = 0
        self.payloads = []
        self.disconnects = 0

    def _publish(self, payload):
        self.attempts += 1
        if self.fail_on is not None and self.attempts == self.fail_on:
            raise ConnectionError("broker gone")
        self.payloads.append(payload)

    def _disconnect(self):
        self.disconnects += 1
        if self.close_error is not None:
            raise self.close_error

    def describe(self):
        return "recording test-topic"


@pytest.fixture
def clock():
    return fixed_clock(TIMESTAMP)


@pytest.fixture
def make_sink():
    return RecordingSink


@pytest.fixture
def sleeps():
    """Records requested sleep durations instead of sleeping."""
    calls = []
    return calls


@pytest.fixture
def write_config(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content)
        return str(path)
    return _write
