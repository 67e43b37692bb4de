from logging import getLogger
from typing import Iterator

from .base import RoundSummary

logger = getLogger(__name__)


class RoundHistory:
    """
    Append-only record of completed rounds for the lifetime of the process.
    """

    def __init__(self) -> None:
        self._rounds: list[RoundSummary] = []

    def record(self, summary: RoundSummary):
        self._rounds.append(summary)
        logger.debug("recorded round %s", len(self._rounds))

    def last(self, n: int) -> tuple[RoundSummary, ...]:
        if n <= 0:
            return ()
        return tuple(self._rounds[-n:])

    def all(self) -> tuple[RoundSummary, ...]:
        return tuple(self._rounds)

    def __getitem__(self, index: int) -> RoundSummary:
        return self._rounds[index]

    def __iter__(self) -> Iterator[RoundSummary]:
        return iter(tuple(self._rounds))

    def __len__(self) -> int:
        return len(self._rounds)
