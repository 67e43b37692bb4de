import curses
from logging import getLogger

from ..services.round import RoundService
from ..types.enums import InputEventType, ScreenType
from ..types.input import InputEvent
from ..types.setting import Setting
from .input_source import CursesInputSource, InputSource
from .prompt_source import PromptSource
from .renderer import AppView, CursesRenderer, Renderer
from .round.engine import RoundEngine
from .round.history import RoundHistory

logger = getLogger(__name__)


class TyperApp:
    """
    Synchronous driving loop: pull one event, hand it to the round service,
    redraw. A missing event only triggers a redraw, which keeps the timer
    moving.
    """

    def __init__(
        self,
        setting: Setting,
        service: RoundService,
        prompt_source: PromptSource,
        input_source: InputSource,
        renderer: Renderer,
    ) -> None:
        self._setting = setting
        self._service = service
        self._prompt_source = prompt_source
        self._input_source = input_source
        self._renderer = renderer
        self._screen = ScreenType.WAITING

    @property
    def screen(self) -> ScreenType:
        return self._screen

    def run(self) -> int:
        logger.info("app started")
        while True:
            self._renderer.draw(self.view())

            event = self._input_source.next_event()
            if event is None:
                continue

            if not self.handle(event):
                break

        logger.info("app stopped")
        return 0

    def handle(self, event: InputEvent) -> bool:
        """
        Returns False when the app should quit.
        """
        if event.event == InputEventType.QUIT:
            if self._screen == ScreenType.ONGOING:
                self._service.cancel()
            return False

        if self._screen == ScreenType.ONGOING:
            self._handle_round(event)
            return True

        if event.event == InputEventType.SUBMIT:
            self.start_round()
        elif event.event == InputEventType.CANCEL:
            return False

        return True

    def start_round(self):
        prompt = self._prompt_source.next_prompt()
        ret = self._service.begin(prompt)
        if not ret.ok:
            logger.error("failed to start round: %s", ret.error)
            return

        self._screen = ScreenType.ONGOING

    def view(self) -> AppView:
        snapshot_ret = self._service.snapshot()
        history_ret = self._service.history()
        statistics_ret = self._service.statistics()
        assert history_ret.data is not None
        assert statistics_ret.data is not None

        return AppView(
            screen=self._screen,
            snapshot=snapshot_ret.data,
            history=tuple(history_ret.data.data),
            statistics=statistics_ret.data,
            show_whitespace=self._setting.ui.show_whitespace,
        )

    def _handle_round(self, event: InputEvent):
        match event.event:
            case InputEventType.CHAR:
                assert event.char is not None
                ret = self._service.type_char(event.char)
                if ret.ok and ret.data and ret.data.summary:
                    self._screen = ScreenType.SUMMARY
            case InputEventType.BACKSPACE:
                ret = self._service.backspace()
            case InputEventType.CANCEL:
                ret = self._service.cancel()
                if ret.ok:
                    self._screen = ScreenType.WAITING
            case _:
                return

        if not ret.ok:
            logger.error("round event rejected, event: %s, error: %s", event, ret.error)


def create_app(
    setting: Setting, window: "curses.window", prompt_source: PromptSource
) -> TyperApp:
    service = RoundService(engine=RoundEngine(), history=RoundHistory())
    return TyperApp(
        setting=setting,
        service=service,
        prompt_source=prompt_source,
        input_source=CursesInputSource(window, tick_ms=setting.ui.tick_ms),
        renderer=CursesRenderer(window),
    )
