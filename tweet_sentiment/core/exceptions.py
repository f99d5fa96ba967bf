"""Exception hierarchy for the sync pipeline."""

from typing import Optional


class SyncError(Exception):
    """Base class for all pipeline errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UpstreamError(SyncError):
    """The source API answered with a non-success status or could not be reached."""


class PaginationLoopError(SyncError):
    """The source kept returning pagination tokens past the per-run page limit."""


class ScoringError(SyncError):
    """The scoring API failed or returned a body that could not be parsed."""


class SinkError(SyncError):
    """Persisting a record or reading the cursor from the sink failed."""


class ConfigError(SyncError):
    """A required setting is missing or invalid."""
