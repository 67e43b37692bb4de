from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator

from .enums import InputEventType


class InputEvent(BaseModel):
    """
    A single discrete key event.
    - char: only set for CHAR events, exactly one character
    """

    model_config = ConfigDict(frozen=True)

    event: InputEventType
    char: str | None = None

    @model_validator(mode="after")
    def check_char(self):
        if self.event == InputEventType.CHAR:
            if self.char is None or len(self.char) != 1:
                raise ValueError("CHAR event needs exactly one character")
        elif self.char is not None:
            raise ValueError(f"{self.event} event does not carry a character")
        return self

    @classmethod
    def typed(cls, char: str) -> Self:
        return cls(event=InputEventType.CHAR, char=char)
