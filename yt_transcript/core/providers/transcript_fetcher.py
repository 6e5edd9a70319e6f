"""
Abstract base class for transcript fetchers.
"""
from abc import ABC, abstractmethod


class TranscriptFetcher(ABC):
    """
    Abstract interface for upstream transcript sources.

    Implementations perform a single fetch and either return the transcript
    as plain text or raise. Failures should be raised as
    ``TranscriptFetchError`` subclasses so they can be classified; any other
    exception is classified as an unknown failure.
    """

    @abstractmethod
    async def fetch(self, video_id: str, language: str) -> str:
        """
        Fetch the transcript for a video.

        Args:
            video_id: YouTube video ID.
            language: Requested language code.

        Returns:
            The transcript text.
        """
        ...
