class InvalidTransition(Exception):
    """
    A round mutation was requested in a phase that forbids it.
    The round is left unchanged.
    """


class InvalidState(Exception):
    """
    Statistics were requested for a round that is not completed.
    """


class PromptUnavailable(Exception):
    """
    The prompt corpus could not be loaded or is empty.
    """
