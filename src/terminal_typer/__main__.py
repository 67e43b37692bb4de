import curses
import sys
from argparse import ArgumentParser
from logging import getLogger

from pydantic import ValidationError

from .lib.app import create_app
from .lib.prompt_source import PromptSource
from .lib.util import init_logger, load_setting
from .types.cli import CLIArgs
from .types.errors import PromptUnavailable
from .types.setting import Setting

logger = getLogger(__name__)


def run(window: "curses.window", setting: Setting, prompt_source: PromptSource) -> int:
    app = create_app(setting, window, prompt_source)
    return app.run()


def main() -> int:
    parser = ArgumentParser("terminal-typer",
                            description="A typing speed test for the terminal")
    parser.add_argument("-c",
                        "--setting",
                        help="Path to setting.yaml file",
                        dest="setting",
                        default="setting.yaml")
    parser.add_argument("--corpus",
                        help="Built-in corpus name (lorem, english) or path to a word file",
                        dest="corpus",
                        default=None)
    parser.add_argument("-w",
                        "--words",
                        help="Prompt length in words",
                        dest="words",
                        type=int,
                        default=None)
    parser.add_argument("--seed",
                        help="Seed for prompt selection",
                        dest="seed",
                        type=int,
                        default=None)
    args = parser.parse_args(namespace=CLIArgs)

    if args.words is not None and args.words <= 0:
        parser.error("--words must be a positive integer")

    try:
        setting = load_setting(args.setting, args)
    except ValidationError as ex:
        print(f"invalid setting: {ex}", file=sys.stderr)
        return 1

    init_logger(setting)

    prompt_source = PromptSource(setting)
    try:
        prompt_source.load_words()
    except PromptUnavailable as ex:
        logger.error("prompt source unavailable: %s", str(ex))
        print(f"error: {ex}", file=sys.stderr)
        return 1

    try:
        return curses.wrapper(run, setting, prompt_source)
    except KeyboardInterrupt:
        logger.info("interrupted")
        return 0
    except curses.error as ex:
        logger.exception("terminal error")
        print(f"terminal error: {ex}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
