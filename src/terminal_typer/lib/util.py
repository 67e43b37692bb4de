from logging import getLogger
from logging.config import dictConfig

from ..types.cli import CLIArgs
from ..types.log import TRACE
from ..types.setting import GameSetting, Setting
from .corpus import BUILTIN_CORPORA

logger = getLogger(__name__)


def init_logger(setting: Setting):
    dictConfig(setting.logger)
    logger.info("logger initialized")
    logger.debug("debug level activated")
    logger.log(TRACE, "trace level activated")


def load_setting(base: str, args: CLIArgs | None = None) -> Setting:
    """
    Load the setting file, then apply command line overrides on top.
    A --corpus value naming a built-in corpus selects it, anything else
    is treated as a word file.
    """
    setting = Setting.from_file(base)
    if args is None:
        return setting

    game_update: dict = {}
    if args.corpus:
        if args.corpus in BUILTIN_CORPORA:
            game_update["corpus"] = args.corpus
            game_update["word_file"] = None
        else:
            game_update["word_file"] = args.corpus
    if args.words is not None:
        game_update["word_count"] = args.words
    if args.seed is not None:
        game_update["seed"] = args.seed

    if game_update:
        game = GameSetting.model_validate(
            setting.game.model_dump() | game_update
        )
        setting = setting.model_copy(update={"game": game})

    return setting
