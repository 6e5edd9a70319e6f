from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from yt_transcript.models.enums import ErrorCategory, OutcomeKind


class TranscriptRequest(BaseModel):
    url: str
    language: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class TranscriptResult(BaseModel):
    """Outcome of one pipeline invocation: transcript text or a presentable error."""

    text: str
    is_error: bool = False
    category: Optional[ErrorCategory] = None
    video_id: Optional[str] = None
    language: Optional[str] = None
    cached: bool = False

    model_config = ConfigDict(frozen=True)


class CachedOutcome(BaseModel):
    """
    Tagged value persisted in the result store.

    The kind is stored explicitly so reads never have to infer success or
    failure from the text itself.
    """

    kind: OutcomeKind
    text: str
    category: Optional[ErrorCategory] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_error(self) -> bool:
        return self.kind == OutcomeKind.ERROR


class ClassifiedError(BaseModel):
    message: str
    category: ErrorCategory

    model_config = ConfigDict(frozen=True)


class UsageEvent(BaseModel):
    """Detailed analytics entry written for failed fetches."""

    video_id: str
    success: bool
    label: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("label")
    @classmethod
    def normalize_label(cls, v: str) -> str:
        return v.strip().replace(":", "_")
