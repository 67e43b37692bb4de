"""
Terminal drawing. Renderers only ever receive an AppView, never the
service or the engine.
"""

import curses
from dataclasses import dataclass, field
from logging import getLogger
from typing import Protocol, TypeVar

from ..services.round import StatisticsRet
from ..types.enums import CharStatus, ScreenType
from .round.base import RoundSnapshot, RoundSummary

logger = getLogger(__name__)

T = TypeVar("T")

BANNER = (
    "+-----------------------------+",
    "|       TERMINAL  TYPER       |",
    "+-----------------------------+",
)

CONTROLS = {
    ScreenType.WAITING: ("[Enter]: New Game", "  [Esc]: Exit Game"),
    ScreenType.ONGOING: ("  [Esc]: Cancel Round",),
    ScreenType.SUMMARY: ("[Enter]: New Game", "  [Esc]: Exit Game"),
}


@dataclass(slots=True, frozen=True)
class AppView:
    """
    Read-only state for a single frame.
    - snapshot: current round, None before the first round
    - history: completed rounds, oldest first
    """

    screen: ScreenType
    snapshot: RoundSnapshot | None = None
    history: tuple[RoundSummary, ...] = ()
    statistics: StatisticsRet = field(default_factory=StatisticsRet)
    show_whitespace: bool = True


class Renderer(Protocol):
    def draw(self, view: AppView) -> None: ...


def format_elapsed(seconds: float) -> str:
    return f"{seconds:.3f}"


def format_wpm(wpm: float | None) -> str:
    if wpm is None:
        return "-"
    return str(round(wpm))


def live_stats_line(snapshot: RoundSnapshot) -> str:
    return (
        f"Accuracy: {snapshot.live_accuracy}%    "
        f"Time Elapsed: {format_elapsed(snapshot.elapsed)}"
    )


def summary_lines(history: tuple[RoundSummary, ...]) -> list[str]:
    lines = ["Previous rounds:"]
    for index, summary in enumerate(history, start=1):
        lines.append(
            f"Round {index}: {round(summary.accuracy * 100)}% accuracy, "
            f"{format_wpm(summary.wpm)} wpm"
        )
    return lines


def statistics_line(statistics: StatisticsRet) -> str:
    return (
        f"Best: {round(statistics.wpm_best)} wpm    "
        f"Last 10: {round(statistics.wpm_avg_10)} wpm, "
        f"{round(statistics.acc_avg_10 * 100)}%    "
        f"All: {round(statistics.wpm_avg_all)} wpm, "
        f"{round(statistics.acc_avg_all * 100)}%"
    )


def wrap_chars(chars: list[T], width: int) -> list[list[T]]:
    if width <= 0:
        return [chars]
    return [chars[i : i + width] for i in range(0, len(chars), width)] or [[]]


class CursesRenderer:
    """
    Draws an AppView to a curses window.

    Attributes:
    - _attrs: curses attribute per character status
    """

    def __init__(self, window: "curses.window") -> None:
        self._window = window
        self._attrs = {
            CharStatus.CORRECT: curses.A_BOLD,
            CharStatus.INCORRECT: curses.A_REVERSE,
            CharStatus.EMPTY: curses.A_DIM,
        }
        self._highlight = curses.A_BOLD

        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(1, curses.COLOR_GREEN, -1)
            curses.init_pair(2, curses.COLOR_RED, -1)
            curses.init_pair(3, curses.COLOR_WHITE, -1)
            curses.init_pair(4, curses.COLOR_YELLOW, -1)
            self._attrs = {
                CharStatus.CORRECT: curses.color_pair(1),
                CharStatus.INCORRECT: curses.color_pair(2),
                CharStatus.EMPTY: curses.color_pair(3) | curses.A_DIM,
            }
            self._highlight = curses.color_pair(4)

        curses.curs_set(0)

    def draw(self, view: AppView) -> None:
        self._window.erase()
        height, width = self._window.getmaxyx()

        if view.screen == ScreenType.WAITING:
            self._draw_centered(BANNER, top=max(0, height // 2 - 4))
        elif view.screen == ScreenType.ONGOING and view.snapshot:
            self._draw_round(view, width)
        elif view.screen == ScreenType.SUMMARY:
            lines = summary_lines(view.history)
            if view.history:
                lines += ["", statistics_line(view.statistics)]
            self._draw_centered(lines, top=1)

        controls = CONTROLS[view.screen]
        for offset, line in enumerate(controls):
            self._put(height - len(controls) + offset, 1, line, self._highlight)

        self._window.refresh()

    def _draw_round(self, view: AppView, width: int):
        snapshot = view.snapshot
        assert snapshot is not None

        line_width = max(1, min(width - 4, 75))
        left = max(0, (width - line_width) // 2)
        chars = snapshot.rendered_chars(view.show_whitespace)
        for row, line in enumerate(wrap_chars(chars, line_width), start=2):
            for col, (glyph, status) in enumerate(line):
                self._put(row, left + col, glyph, self._attrs[status])

        self._put(1, left, live_stats_line(snapshot))

    def _draw_centered(self, lines, top: int):
        _, width = self._window.getmaxyx()
        for offset, line in enumerate(lines):
            self._put(top + offset, max(0, (width - len(line)) // 2), line)

    def _put(self, y: int, x: int, text: str, attr: int = 0):
        height, width = self._window.getmaxyx()
        if y < 0 or y >= height or x >= width - 1:
            return
        # the last column is left alone, writing there moves the cursor off screen
        self._window.addstr(y, x, text[: width - 1 - x], attr)
