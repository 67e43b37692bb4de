from dataclasses import replace
from logging import getLogger
from threading import Lock
from time import monotonic
from typing import Callable

from ...types.enums import RoundPhase
from ...types.errors import InvalidTransition
from ...types.log import TRACE
from .base import RoundSnapshot, RoundState, TypedChar

logger = getLogger(__name__)


class RoundEngine:
    """
    State machine for a single round.

    Mutations are serialized with a lock. Every mutation builds a new
    immutable RoundState and swaps it in, so snapshots can be taken
    without the lock.

    Attributes:
    - _clock: monotonic seconds
    - _state: None until the first round begins
    """

    def __init__(self, clock: Callable[[], float] = monotonic) -> None:
        self._clock = clock
        self._lock = Lock()
        self._state: RoundState | None = None

    @property
    def state(self) -> RoundState | None:
        return self._state

    @property
    def phase(self) -> RoundPhase | None:
        state = self._state
        return state.phase if state else None

    def begin(self, prompt: str) -> RoundState:
        if not prompt:
            raise ValueError("prompt must not be empty")

        with self._lock:
            if self._state and self._state.phase == RoundPhase.IN_PROGRESS:
                raise InvalidTransition("cannot begin a round while one is in progress")

            new_state = RoundState(prompt=prompt)
            self._state = new_state

        logger.debug("round begin, prompt length: %s", len(prompt))
        return new_state

    def type_char(self, char: str) -> RoundState:
        if len(char) != 1:
            raise ValueError(f"expected a single character, got: {char!r}")

        with self._lock:
            state = self._require(
                "type", RoundPhase.NOT_STARTED, RoundPhase.IN_PROGRESS
            )

            started_at = state.started_at
            if state.phase == RoundPhase.NOT_STARTED:
                started_at = self._clock()

            index = len(state.typed)
            typed = state.typed + (TypedChar(char=char, correct=char == state.prompt[index]),)

            phase = RoundPhase.IN_PROGRESS
            finished_at = None
            if len(typed) == len(state.prompt):
                phase = RoundPhase.COMPLETED
                finished_at = self._clock()

            new_state = replace(
                state,
                phase=phase,
                typed=typed,
                started_at=started_at,
                finished_at=finished_at,
            )
            self._state = new_state

        logger.log(TRACE, "typed: %r, index: %s, phase: %s", char, index, phase)
        return new_state

    def backspace(self) -> RoundState:
        with self._lock:
            state = self._require(
                "backspace", RoundPhase.NOT_STARTED, RoundPhase.IN_PROGRESS
            )

            if not state.typed:
                logger.log(TRACE, "backspace on empty buffer, ignored")
                return state

            new_state = replace(state, typed=state.typed[:-1])
            self._state = new_state

        logger.log(TRACE, "backspace, buffer length: %s", len(new_state.typed))
        return new_state

    def cancel(self) -> RoundState:
        with self._lock:
            state = self._require(
                "cancel", RoundPhase.NOT_STARTED, RoundPhase.IN_PROGRESS
            )
            new_state = replace(state, phase=RoundPhase.CANCELLED)
            self._state = new_state

        logger.debug("round cancelled, typed: %s/%s", len(state.typed), len(state.prompt))
        return new_state

    def current_snapshot(self) -> RoundSnapshot | None:
        state = self._state
        if state is None:
            return None
        return self.snapshot(state)

    def snapshot(self, state: RoundState) -> RoundSnapshot:
        return RoundSnapshot(
            phase=state.phase,
            prompt=state.prompt,
            typed=state.typed,
            elapsed=self._elapsed(state),
        )

    def _elapsed(self, state: RoundState) -> float:
        if state.started_at is None:
            return 0.0
        if state.finished_at is not None:
            return max(0.0, state.finished_at - state.started_at)
        if state.phase == RoundPhase.CANCELLED:
            return 0.0
        return max(0.0, self._clock() - state.started_at)

    def _require(self, action: str, *phases: RoundPhase) -> RoundState:
        state = self._state
        if state is None:
            raise InvalidTransition(f"cannot {action}, no round has begun")
        if state.phase not in phases:
            raise InvalidTransition(f"cannot {action} in phase {state.phase}")
        return state
