"""Error taxonomy shared by the converter, the cleaners and the CLI."""


class MarkupCleanerError(Exception):
    """Base class; ``str(err)`` is the human-readable message."""


class EmptyInputError(MarkupCleanerError):
    def __init__(self, message: str = "Input is empty."):
        super().__init__(message)


class ParseError(MarkupCleanerError):
    """The markup could not be parsed at all."""


class TooDeepError(MarkupCleanerError):
    def __init__(self, limit: int):
        super().__init__(f"Markup nesting exceeds the maximum depth ({limit}).")
        self.limit = limit


class RemoteCleanError(MarkupCleanerError):
    """The remote model call failed or returned no content."""
