import logging

import time_machine

from ...services.base import ServiceRet
from ...types.enums import ErrorCode
from ...types.log import TRACE
from ..helper import *


@time_machine.travel(NOW, tick=False)
def test_service_round_complete(service: RoundService, history: RoundHistory, clock: FakeClock):
    ret = service.begin("cat")
    assert ret.ok
    assert ret.data and ret.data.phase == RoundPhase.NOT_STARTED

    for char in "cat":
        clock.advance(0.5)
        ret = service.type_char(char)
        assert ret.ok
        assert ret.data

    assert ret.data.snapshot.phase == RoundPhase.COMPLETED
    summary = ret.data.summary
    assert summary
    assert summary.accuracy == 1.0
    assert summary.elapsed == pytest.approx(1.0)
    assert summary.wpm == pytest.approx((3 / 5) / (1 / 60))
    assert summary.finished == NOW.isoformat()

    assert len(history) == 1
    assert history[0] is summary


def test_service_round_summary_only_once(service: RoundService, history: RoundHistory):
    service.begin("ab")
    first = service.type_char("a")
    assert first.ok and first.data and first.data.summary is None

    service.type_char("b")
    ret = service.type_char("c")
    assert not ret.ok
    assert ret.error and ret.error.code == ErrorCode.INVALID_TRANSITION
    assert len(history) == 1


def test_service_round_cancel(service: RoundService, history: RoundHistory):
    service.begin("cat")
    service.type_char("c")

    ret = service.cancel()
    assert ret.ok
    assert ret.data and ret.data.phase == RoundPhase.CANCELLED
    assert len(history) == 0

    ret = service.cancel()
    assert not ret.ok
    assert ret.error and ret.error.code == ErrorCode.INVALID_TRANSITION


def test_service_round_begin_in_progress(service: RoundService):
    service.begin("cat")
    service.type_char("c")

    ret = service.begin("dog")
    assert not ret.ok
    assert ret.error and ret.error.code == ErrorCode.INVALID_TRANSITION

    snapshot = service.snapshot()
    assert snapshot.ok and snapshot.data
    assert snapshot.data.prompt == "cat"


def test_service_round_invalid_input(service: RoundService):
    ret = service.begin("")
    assert not ret.ok
    assert ret.error and ret.error.code == ErrorCode.INVALID_INPUT

    service.begin("cat")
    ret = service.type_char("ca")
    assert not ret.ok
    assert ret.error and ret.error.code == ErrorCode.INVALID_INPUT


def test_service_round_backspace(service: RoundService):
    service.begin("cat")
    ret = service.backspace()
    assert ret.ok

    service.type_char("x")
    ret = service.backspace()
    assert ret.ok and ret.data
    assert ret.data.typed == ()
    assert ret.data.phase == RoundPhase.IN_PROGRESS


def test_service_round_no_round(service: RoundService):
    ret = service.snapshot()
    assert not ret.ok
    assert ret.error and ret.error.code == ErrorCode.ROUND_NOT_FOUND

    ret = service.type_char("a")
    assert not ret.ok
    assert ret.error and ret.error.code == ErrorCode.INVALID_TRANSITION


def play(service: RoundService, clock: FakeClock, prompt: str, typed: str, seconds: float):
    service.begin(prompt)
    for char in typed:
        service.type_char(char)
        clock.advance(seconds / len(typed))


def test_service_round_statistics(service: RoundService, clock: FakeClock):
    ret = service.statistics()
    assert ret.ok and ret.data
    assert ret.data.total == 0
    assert ret.data.wpm_best == 0

    # 10 chars = 2 words
    play(service, clock, "abcdefghij", "abcdefghij", 6)
    play(service, clock, "abcdefghij", "abcdefghiX", 12)

    ret = service.statistics()
    assert ret.ok and ret.data
    assert ret.data.total == 2
    assert ret.data.acc_best == 1.0
    assert ret.data.acc_avg_all == pytest.approx(0.95)
    assert ret.data.acc_avg_10 == pytest.approx(0.95)

    history_ret = service.history()
    assert history_ret.data
    wpms = [item.wpm for item in history_ret.data.data]
    assert ret.data.wpm_best == max(wpms)
    assert ret.data.wpm_avg_all == pytest.approx(sum(wpms) / 2)


def test_service_round_statistics_last_10(service: RoundService, clock: FakeClock):
    play(service, clock, "ab", "xx", 1)
    for _ in range(10):
        play(service, clock, "ab", "ab", 1)

    ret = service.statistics()
    assert ret.ok and ret.data
    assert ret.data.total == 11
    assert ret.data.acc_avg_10 == 1.0
    assert ret.data.acc_avg_all == pytest.approx(10 / 11)


def test_service_round_statistics_undefined_wpm(service: RoundService):
    # the clock never moves
    service.begin("ab")
    service.type_char("a")
    service.type_char("b")

    ret = service.statistics()
    assert ret.ok and ret.data
    assert ret.data.total == 1
    assert ret.data.wpm_best == 0
    assert ret.data.wpm_avg_all == 0
    assert ret.data.acc_best == 1.0


def test_service_round_history_size(service: RoundService, clock: FakeClock):
    for _ in range(3):
        play(service, clock, "ab", "ab", 1)

    ret = service.history(size=2)
    assert ret.ok and ret.data
    assert ret.data.total == 3
    assert len(ret.data.data) == 2


def test_service_round_records_despite_interleaved_begin(
    service: RoundService, engine: RoundEngine, history: RoundHistory, clock: FakeClock
):
    engine_logger = logging.getLogger("terminal_typer.lib.round.engine")
    level = engine_logger.level
    engine_logger.setLevel(TRACE)

    service.begin("ab")
    clock.advance(1)
    service.type_char("a")
    clock.advance(1)

    fired = []

    class BeginOnLog(logging.Handler):
        def emit(self, record: logging.LogRecord):
            if not fired:
                fired.append(record)
                engine.begin("next")

    handler = BeginOnLog(level=TRACE)
    engine_logger.addHandler(handler)
    try:
        ret = service.type_char("b")
    finally:
        engine_logger.removeHandler(handler)
        engine_logger.setLevel(level)

    assert fired
    assert ret.ok and ret.data
    assert ret.data.snapshot.phase == RoundPhase.COMPLETED
    assert ret.data.snapshot.prompt == "ab"
    assert ret.data.summary and ret.data.summary.prompt == "ab"
    assert len(history) == 1
    assert history[0].accuracy == 1.0


def test_service_ret_fail():
    ret = ServiceRet.fail(ErrorCode.ROUND_NOT_FOUND, "no round")
    assert not ret.ok
    assert ret.data is None
    assert ret.error and ret.error.code == ErrorCode.ROUND_NOT_FOUND
    assert ret.error.message == "no round"

    ret = ServiceRet.fail(ErrorCode.INVALID_INPUT)
    assert ret.error and ret.error.message == ""
