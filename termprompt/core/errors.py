"""
Error types raised by termprompt widgets.
"""


class UserAborted(Exception):
    """Raised when the user presses Ctrl+C inside a prompt."""

    def __init__(self, message: str = "user aborted"):
        super().__init__(message)


class EmptyInput(ValueError):
    """Raised when a selection prompt is given nothing to choose from."""

    def __init__(self, message: str = "no items to select"):
        super().__init__(message)


class TerminalError(OSError):
    """Raised when the terminal can't be switched into (or out of) raw mode."""
    pass
