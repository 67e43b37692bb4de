from dataclasses import dataclass, field
from logging import getLogger
from statistics import fmean

from ..lib.round.base import RoundSnapshot, RoundSummary
from ..lib.round.engine import RoundEngine
from ..lib.round.history import RoundHistory
from ..lib.round.stats import summarize
from ..types.enums import ErrorCode, RoundPhase
from ..types.errors import InvalidState, InvalidTransition
from .base import ServiceRet

logger = getLogger(__name__)


@dataclass(slots=True)
class KeystrokeRet:
    """
    - summary: only set by the keystroke that completed the round
    """

    snapshot: RoundSnapshot
    summary: RoundSummary | None = None


@dataclass(slots=True)
class StatisticsRet:
    total: int = 0

    wpm_best: float = 0
    wpm_avg_10: float = 0
    wpm_avg_all: float = 0

    acc_best: float = 0
    acc_avg_10: float = 0
    acc_avg_all: float = 0


@dataclass(slots=True)
class HistoryRet:
    total: int = 0
    data: list[RoundSummary] = field(default_factory=list)


class RoundService:
    """
    Owns the session: the round engine and the history of finished rounds.
    Engine errors are returned as failed ServiceRet instead of raised.
    """

    def __init__(self, engine: RoundEngine, history: RoundHistory) -> None:
        self._engine = engine
        self._history = history

    @property
    def phase(self) -> RoundPhase | None:
        return self._engine.phase

    def begin(self, prompt: str) -> ServiceRet[RoundSnapshot]:
        logger.debug("prompt: %r", prompt)
        try:
            state = self._engine.begin(prompt)
        except InvalidTransition as ex:
            return self._transition_error(ex)
        except ValueError as ex:
            return self._input_error(ex)

        return ServiceRet(ok=True, data=self._engine.snapshot(state))

    def type_char(self, char: str) -> ServiceRet[KeystrokeRet]:
        try:
            state = self._engine.type_char(char)
        except InvalidTransition as ex:
            return self._transition_error(ex)
        except ValueError as ex:
            return self._input_error(ex)

        summary = None
        if state.phase == RoundPhase.COMPLETED:
            try:
                summary = summarize(state)
            except InvalidState as ex:
                logger.warning("invalid state: %s", str(ex))
                return ServiceRet.fail(ErrorCode.INVALID_STATE, str(ex))
            self._history.record(summary)
            logger.info(
                "round completed, wpm: %s, accuracy: %s, elapsed: %.3f",
                summary.wpm,
                summary.accuracy,
                summary.elapsed,
            )

        return ServiceRet(
            ok=True,
            data=KeystrokeRet(snapshot=self._engine.snapshot(state), summary=summary),
        )

    def backspace(self) -> ServiceRet[RoundSnapshot]:
        try:
            state = self._engine.backspace()
        except InvalidTransition as ex:
            return self._transition_error(ex)

        return ServiceRet(ok=True, data=self._engine.snapshot(state))

    def cancel(self) -> ServiceRet[RoundSnapshot]:
        try:
            state = self._engine.cancel()
        except InvalidTransition as ex:
            return self._transition_error(ex)

        logger.info("round cancelled")
        return ServiceRet(ok=True, data=self._engine.snapshot(state))

    def snapshot(self) -> ServiceRet[RoundSnapshot]:
        snapshot = self._engine.current_snapshot()
        if snapshot is None:
            return ServiceRet.fail(ErrorCode.ROUND_NOT_FOUND)
        return ServiceRet(ok=True, data=snapshot)

    def history(self, size: int | None = None) -> ServiceRet[HistoryRet]:
        rounds = self._history.all() if size is None else self._history.last(size)
        return ServiceRet(
            ok=True, data=HistoryRet(total=len(self._history), data=list(rounds))
        )

    def statistics(self) -> ServiceRet[StatisticsRet]:
        """
        Aggregates over the history. Rounds without a defined wpm are
        left out of the wpm figures.
        """
        rounds = self._history.all()
        if not rounds:
            return ServiceRet(ok=True, data=StatisticsRet())

        last_10 = rounds[-10:]
        wpm_all = _wpms(rounds)
        wpm_last_10 = _wpms(last_10)

        return ServiceRet(
            ok=True,
            data=StatisticsRet(
                total=len(rounds),
                wpm_best=max(wpm_all, default=0),
                wpm_avg_10=fmean(wpm_last_10) if wpm_last_10 else 0,
                wpm_avg_all=fmean(wpm_all) if wpm_all else 0,
                acc_best=max(item.accuracy for item in rounds),
                acc_avg_10=fmean(item.accuracy for item in last_10),
                acc_avg_all=fmean(item.accuracy for item in rounds),
            ),
        )

    def _transition_error(self, ex: InvalidTransition) -> ServiceRet:
        logger.warning("invalid transition: %s", str(ex))
        return ServiceRet.fail(ErrorCode.INVALID_TRANSITION, str(ex))

    def _input_error(self, ex: ValueError) -> ServiceRet:
        logger.warning("invalid input: %s", str(ex))
        return ServiceRet.fail(ErrorCode.INVALID_INPUT, str(ex))


def _wpms(rounds: tuple[RoundSummary, ...]) -> list[float]:
    return [item.wpm for item in rounds if item.wpm is not None]
