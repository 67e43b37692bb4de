from logging import getLogger
from pathlib import Path
from random import Random

from ..types.errors import PromptUnavailable
from ..types.setting import Setting
from .corpus import BUILTIN_CORPORA

logger = getLogger(__name__)


class PromptSource:
    """
    Generates prompts for rounds from a built-in corpus or a word file
    """

    def __init__(self, setting: Setting, rng: Random | None = None) -> None:
        self._setting = setting
        self._rng = rng or Random(setting.game.seed)
        self._words: list[str] = []

    @property
    def words(self) -> list[str]:
        return self._words

    def load_words(self):
        word_file = self._setting.game.word_file
        if word_file:
            path = Path(word_file)
            try:
                content = path.read_text(encoding="utf-8")
            except OSError as ex:
                raise PromptUnavailable(f"cannot read word file {word_file}: {ex}") from ex
            source = word_file
        else:
            corpus = self._setting.game.corpus
            if corpus not in BUILTIN_CORPORA:
                raise PromptUnavailable(
                    f"unknown corpus: {corpus}, choose from {', '.join(BUILTIN_CORPORA)}"
                )
            content = BUILTIN_CORPORA[corpus]
            source = corpus

        self._words = content.split()
        if not self._words:
            raise PromptUnavailable(f"no words found in: {source}")

        logger.info("load words from: %s, word count: %s", source, len(self._words))

    def next_prompt(self, word_count: int | None = None) -> str:
        if not self._words:
            self.load_words()

        if word_count is None:
            word_count = self._setting.game.word_count
        if word_count <= 0:
            raise ValueError("word_count must be a positive integer")

        # sample without repeats while the corpus allows it
        if word_count <= len(self._words):
            picked = self._rng.sample(self._words, word_count)
        else:
            picked = self._rng.choices(self._words, k=word_count)

        prompt = " ".join(picked)
        logger.debug("prompt: %r", prompt)
        return prompt
