"""
Exception hierarchy for transcript retrieval.

Only ``InvalidInputError`` and ``UpstreamFetchError`` are meant to reach
callers. ``StoreError`` is raised by store backends and absorbed by the
pipeline. ``TranscriptFetchError`` is the raw fault raised by fetchers before
it is classified.
"""
from typing import Optional

from yt_transcript.models.enums import ErrorCategory


class TranscriptError(Exception):
    """Base exception carrying a short, user-presentable message."""

    def __init__(self, detail: str, category: ErrorCategory):
        self.detail = detail
        self.category = category
        super().__init__(detail)


class InvalidInputError(TranscriptError):
    """Malformed or unrecognized URL, or the video ID could not be derived."""

    def __init__(self, detail: str = "Invalid YouTube URL provided."):
        super().__init__(detail=detail, category=ErrorCategory.INVALID_INPUT)


class UpstreamFetchError(TranscriptError):
    """Classified transcript fetch failure (fresh or cached)."""

    def __init__(self, detail: str, category: ErrorCategory = ErrorCategory.UNKNOWN):
        super().__init__(detail=detail, category=category)


class StoreError(Exception):
    """Cache or counter backend failure. Never surfaced to callers."""


class TranscriptFetchError(Exception):
    """
    Raw failure raised by a transcript fetcher.

    Attributes:
        category: Failure category assigned by the fetcher.
        name: Short label of the failure kind, used for usage analytics.
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(self, message: str, name: Optional[str] = None):
        self.name = name or type(self).__name__
        super().__init__(message)


class VideoNotFoundError(TranscriptFetchError):
    category = ErrorCategory.NOT_FOUND


class TranscriptsDisabledError(TranscriptFetchError):
    category = ErrorCategory.DISABLED


class NoTranscriptError(TranscriptFetchError):
    category = ErrorCategory.NO_TRANSCRIPT


class ServiceBusyError(TranscriptFetchError):
    category = ErrorCategory.SERVICE_BUSY
