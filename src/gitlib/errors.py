"""Error type raised by every gitlib operation."""


class GitCommandError(RuntimeError):
    """A git invocation, or the interpretation of its output, failed.

    Carries a single human-readable message. When git itself exits non-zero,
    the message is git's own stderr text, unmodified.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
