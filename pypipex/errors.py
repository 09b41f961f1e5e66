"""Exceptions raised while setting up or running a two-command pipeline."""


class PipexError(Exception):
    """A fatal pipeline error carrying the exit status the program ends with."""

    def __init__(self, message, exit_code):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class CommandNotFoundError(PipexError):
    """A command could not be located or executed; exits with status 127."""

    def __init__(self, message):
        super().__init__(message, 127)