import io

import pytest

from progress_printer import progress as progress_mod


class FakeClock:
    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock(monkeypatch):
    """Replace the monotonic clock used by the printer."""
    fake = FakeClock()
    monkeypatch.setattr(progress_mod, "_now", fake)
    return fake


@pytest.fixture
def streams():
    """(live, final) in-memory streams."""
    return io.StringIO(), io.StringIO()


@pytest.fixture
def term_width(monkeypatch):
    """Pretend the live stream is a terminal of the given width."""
    def _set(width: int) -> None:
        monkeypatch.setattr(progress_mod, "_terminal_width", lambda _stream: width)
    return _set
