"""Shared test fixtures."""
import io
import pytest

# 2016-01-02 03:04:05 UTC
START_TIME = 1451703845.0


class FakeClock:
    """Stand-in for time.time() that only moves when told to."""

    def __init__(self, now=START_TIME):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def output():
    """In-memory sink capturing printed lines."""
    return io.StringIO()


@pytest.fixture
def clock(mocker):
    """Freeze the printer's clock at START_TIME."""
    fake = FakeClock()
    mocker.patch('progress_printer.printer.time.time', new=fake)
    return fake


@pytest.fixture
def start_time():
    return START_TIME
