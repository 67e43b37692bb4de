from __future__ import annotations

from logging import getLogger
from os import getenv
from pathlib import Path
from typing import Self

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
LOG_FILE = getenv("LOG_FILE", "terminal_typer.log")

logger = getLogger(__name__)


def default_logger() -> dict:
    """
    curses owns the terminal, so records go to a file instead of a stream.
    """
    return {
        "disable_existing_loggers": False,
        "version": 1,
        "handlers": {
            "default": {
                "class": "logging.FileHandler",
                "formatter": "default",
                "filename": LOG_FILE,
                "encoding": "utf-8",
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s %(name)s:%(funcName)s:%(lineno)d :: %(message)s"
            }
        },
        "root": {"level": "INFO", "handlers": ["default"]},
        "loggers": {"terminal_typer": {"level": LOG_LEVEL}},
    }


class GameSetting(BaseModel):
    """
    Attributes:
    - corpus: built-in corpus name, used when word_file is not set
    - word_file: path to a whitespace separated word list
    - word_count: prompt length in words
    - seed: seed for prompt selection, random when not set
    """

    corpus: str = "lorem"
    word_file: str | None = None
    word_count: int = 10
    seed: int | None = None

    @field_validator("word_count")
    @classmethod
    def check_word_count(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("word_count must be a positive integer")
        return value


class UISetting(BaseModel):
    """
    Attributes:
    - tick_ms: how long to wait for a key before redrawing the timer
    - show_whitespace: draw typed spaces as a visible dot
    """

    tick_ms: int = 100
    show_whitespace: bool = True


class Setting(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    game: GameSetting = Field(default_factory=GameSetting)
    ui: UISetting = Field(default_factory=UISetting)
    logger: dict = Field(default_factory=default_logger)

    @classmethod
    def from_file(cls, base: str = "setting.yaml") -> Self:
        base_file = Path(base)
        if base_file.exists():
            with base_file.open("r") as f:
                loaded = yaml.safe_load(f) or {}
                base_setting = cls(**loaded)
        else:
            logger.warning("base setting file not found at: %s, using default.", base)
            base_setting = cls()

        return base_setting


if __name__ == "__main__":
    print(yaml.safe_dump(Setting().model_dump()))
