from datetime import UTC, datetime
from typing import Iterable, Iterator

import pytest

from ..lib.round.engine import RoundEngine
from ..lib.round.history import RoundHistory
from ..services.round import RoundService
from ..types.enums import InputEventType, RoundPhase
from ..types.input import InputEvent
from ..types.setting import Setting

tmp_now = datetime.now(UTC)
NOW = datetime(year=tmp_now.year, month=tmp_now.month, day=tmp_now.day, tzinfo=UTC)


class FakeClock:
    """
    Monotonic clock that only moves when told to.
    """

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class ScriptedInputSource:
    """
    Replays a fixed sequence of events, then reports QUIT.
    """

    def __init__(self, events: Iterable[InputEvent | None]) -> None:
        self._events: Iterator[InputEvent | None] = iter(events)

    def next_event(self) -> InputEvent | None:
        return next(self._events, InputEvent(event=InputEventType.QUIT))


def type_text(engine: RoundEngine, text: str, clock: FakeClock | None = None, step: float = 0.2):
    for char in text:
        if clock:
            clock.advance(step)
        engine.type_char(char)


@pytest.fixture
def setting() -> Setting:
    setting = Setting.from_file()
    return setting


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine(clock: FakeClock) -> RoundEngine:
    return RoundEngine(clock=clock)


@pytest.fixture
def history() -> RoundHistory:
    return RoundHistory()


@pytest.fixture
def service(engine: RoundEngine, history: RoundHistory) -> RoundService:
    return RoundService(engine=engine, history=history)
