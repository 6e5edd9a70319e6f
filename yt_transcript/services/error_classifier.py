"""
Maps raw transcript fetch failures onto stable, user-presentable messages.

``ERROR_PHRASES`` is the only registry of error phrases and every message
in ``ERROR_MESSAGES`` is built from it. The result cache uses
``match_error_message`` to recognise legacy untagged cache entries.
"""
import asyncio
from typing import Optional

from yt_transcript.core.exceptions import TranscriptFetchError
from yt_transcript.models import ClassifiedError, ErrorCategory

GENERIC_ERROR_MARKER = "Error:"

ERROR_PHRASES: dict[ErrorCategory, str] = {
    ErrorCategory.NOT_FOUND: "Video not found or private",
    ErrorCategory.DISABLED: "Transcripts are disabled",
    ErrorCategory.NO_TRANSCRIPT: "No transcript available",
    ErrorCategory.SERVICE_BUSY: "Service temporarily busy",
}

ERROR_MESSAGES: dict[ErrorCategory, str] = {
    ErrorCategory.NOT_FOUND: f"{ERROR_PHRASES[ErrorCategory.NOT_FOUND]}.",
    ErrorCategory.DISABLED: f"{ERROR_PHRASES[ErrorCategory.DISABLED]} for this video.",
    ErrorCategory.NO_TRANSCRIPT: f"{ERROR_PHRASES[ErrorCategory.NO_TRANSCRIPT]} in the requested language.",
    ErrorCategory.SERVICE_BUSY: f"{ERROR_PHRASES[ErrorCategory.SERVICE_BUSY]}. Please try again later.",
    ErrorCategory.UNKNOWN: f"{GENERIC_ERROR_MARKER} Failed to retrieve the transcript.",
}


def classify_error(error: BaseException) -> ClassifiedError:
    """Classify a raw fetch failure. Pure and deterministic."""
    if isinstance(error, TranscriptFetchError):
        category = error.category
    elif isinstance(error, asyncio.TimeoutError):
        category = ErrorCategory.SERVICE_BUSY
    else:
        category = ErrorCategory.UNKNOWN
    return ClassifiedError(message=ERROR_MESSAGES[category], category=category)


def error_label(error: BaseException) -> str:
    """Analytics label for a raw failure."""
    if isinstance(error, TranscriptFetchError):
        return error.name
    name = type(error).__name__
    return name if name != "Exception" else "FetchError"


def match_error_message(text: str) -> Optional[ErrorCategory]:
    """Return the category of a stored error message, or None for transcript text."""
    if text.startswith(GENERIC_ERROR_MARKER):
        return ErrorCategory.UNKNOWN
    for category, phrase in ERROR_PHRASES.items():
        if phrase in text:
            return category
    return None
