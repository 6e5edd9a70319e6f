"""
Enums for type-safe values across the package.
"""
from enum import Enum


class OutcomeKind(str, Enum):
    """Kind of a stored transcript outcome."""
    SUCCESS = "success"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """Stable failure categories, also used as analytics labels."""
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    DISABLED = "transcripts_disabled"
    NO_TRANSCRIPT = "no_transcript"
    SERVICE_BUSY = "service_busy"
    UNKNOWN = "unknown"
