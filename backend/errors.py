class StudioError(Exception):
    """Base class for every error raised by the studio."""


class GenerationError(StudioError):
    """The model call failed: transport, status, refusal or a response that does not fit the schema."""


class PreconditionError(StudioError):
    """Required input is missing, so no call was issued."""


class HistoryError(StudioError):
    """The history file could not be read or written."""
