from datetime import UTC, datetime
from logging import getLogger

from ...types.enums import RoundPhase
from ...types.errors import InvalidState
from .base import RoundState, RoundSummary

logger = getLogger(__name__)

CHARS_PER_WORD = 5


def words_per_minute(char_count: int, elapsed: float) -> float | None:
    """
    (char_count / 5) per minute. None when elapsed is zero, a round
    finished faster than the clock can resolve has no meaningful speed.
    """
    if elapsed <= 0:
        return None
    return (char_count / CHARS_PER_WORD) / (elapsed / 60)


def summarize(state: RoundState) -> RoundSummary:
    if state.phase != RoundPhase.COMPLETED:
        raise InvalidState(f"cannot summarize a round in phase {state.phase}")

    # completed rounds always carry both timestamps
    assert state.started_at is not None
    assert state.finished_at is not None

    prompt_length = len(state.prompt)
    correct_count = state.correct_count
    elapsed = max(0.0, state.finished_at - state.started_at)

    summary = RoundSummary(
        prompt=state.prompt,
        prompt_length=prompt_length,
        correct_count=correct_count,
        elapsed=elapsed,
        wpm=words_per_minute(prompt_length, elapsed),
        wpm_correct=words_per_minute(correct_count, elapsed),
        accuracy=correct_count / prompt_length,
        finished=datetime.now(UTC).isoformat(),
    )
    logger.debug("summary: %s", summary.model_dump_json())
    return summary
