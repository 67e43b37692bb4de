from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from ...types.enums import CharStatus, RoundPhase

WHITESPACE_GLYPH = "·"


@dataclass(slots=True, frozen=True)
class TypedChar:
    char: str
    correct: bool


@dataclass(slots=True, frozen=True)
class RoundState:
    """
    Immutable view of a round. The engine swaps in a new instance on
    every mutation.

    Attributes:
    - started_at: monotonic seconds of the first accepted keystroke
    - finished_at: monotonic seconds of the keystroke that filled the prompt
    """

    prompt: str
    phase: RoundPhase = RoundPhase.NOT_STARTED
    typed: tuple[TypedChar, ...] = ()
    started_at: float | None = None
    finished_at: float | None = None

    @property
    def correct_count(self) -> int:
        return sum(1 for item in self.typed if item.correct)


@dataclass(slots=True, frozen=True)
class RoundSnapshot:
    """
    Read-only data handed to the renderer.
    - elapsed: seconds since the first keystroke, frozen once completed
    """

    phase: RoundPhase
    prompt: str
    typed: tuple[TypedChar, ...]
    elapsed: float

    @property
    def correct_count(self) -> int:
        return sum(1 for item in self.typed if item.correct)

    @property
    def live_accuracy(self) -> int:
        """
        Percentage of typed characters that are correct, rounded.
        """
        if not self.typed:
            return 0
        return round(self.correct_count / len(self.typed) * 100)

    def status_at(self, index: int) -> CharStatus:
        if index >= len(self.typed):
            return CharStatus.EMPTY
        if self.typed[index].correct:
            return CharStatus.CORRECT
        return CharStatus.INCORRECT

    def rendered_chars(self, show_whitespace: bool = True) -> list[tuple[str, CharStatus]]:
        """
        One (glyph, status) pair per prompt position. Typed positions show
        what was typed, the rest show the prompt.
        """
        ret: list[tuple[str, CharStatus]] = []
        for index, expected in enumerate(self.prompt):
            if index < len(self.typed):
                glyph = self.typed[index].char
                if show_whitespace and glyph == " ":
                    glyph = WHITESPACE_GLYPH
            else:
                glyph = expected
            ret.append((glyph, self.status_at(index)))
        return ret


class RoundSummary(BaseModel):
    """
    - elapsed: seconds
    - wpm: (prompt_length / 5) per minute, None when elapsed is zero
    - wpm_correct: (correct_count / 5) per minute, None when elapsed is zero
    - accuracy: correct_count / prompt_length, 0.0 - 1.0
    - finished: ISO 8601 format timestamp
    """

    model_config = ConfigDict(frozen=True)

    prompt: str
    prompt_length: int
    correct_count: int
    elapsed: float = Field(ge=0)
    wpm: float | None = None
    wpm_correct: float | None = None
    accuracy: float = Field(ge=0, le=1)
    finished: str
