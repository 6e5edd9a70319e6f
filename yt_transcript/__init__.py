"""
Cached YouTube transcript retrieval.
"""
from yt_transcript.services.transcript import TranscriptService
from yt_transcript.models import TranscriptRequest, TranscriptResult

__all__ = ["TranscriptService", "TranscriptRequest", "TranscriptResult"]
