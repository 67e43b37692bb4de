from enum import StrEnum


class ErrorCode(StrEnum):
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    INVALID_STATE = "INVALID_STATE"
    INVALID_INPUT = "INVALID_INPUT"
    ROUND_NOT_FOUND = "ROUND_NOT_FOUND"


class RoundPhase(StrEnum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class CharStatus(StrEnum):
    CORRECT = "CORRECT"
    INCORRECT = "INCORRECT"
    EMPTY = "EMPTY"


class InputEventType(StrEnum):
    CHAR = "CHAR"
    BACKSPACE = "BACKSPACE"
    CANCEL = "CANCEL"
    SUBMIT = "SUBMIT"
    QUIT = "QUIT"


class ScreenType(StrEnum):
    WAITING = "WAITING"
    ONGOING = "ONGOING"
    SUMMARY = "SUMMARY"
