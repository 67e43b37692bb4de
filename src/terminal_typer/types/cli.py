from dataclasses import dataclass


@dataclass
class CLIArgs:
    """
    Properties:
    - setting: Path to setting.yaml file.
    - corpus: Built-in corpus name or path to a word file.
    - words: Prompt length in words.
    - seed: Seed for prompt selection.
    """
    setting: str
    corpus: str | None
    words: int | None
    seed: int | None
