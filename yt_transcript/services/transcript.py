"""
Transcript retrieval pipeline: validate, identify, track, look up, fetch, cache.
"""
from typing import Optional

from loguru import logger

from yt_transcript.core.exceptions import InvalidInputError, UpstreamFetchError
from yt_transcript.core.providers.transcript_fetcher import TranscriptFetcher
from yt_transcript.models import CachedOutcome, ErrorCategory, TranscriptRequest, TranscriptResult
from yt_transcript.repositories.result_cache import ResultCache
from yt_transcript.services.error_classifier import classify_error, error_label
from yt_transcript.services.url import (
    extract_video_id,
    is_valid_youtube_url,
    normalize_youtube_url,
)
from yt_transcript.services.usage import UsageTracker


class TranscriptService:
    """
    Retrieves a transcript for a YouTube URL, caching both transcripts and
    classified failures.

    Each call runs this pipeline:
    1. Validates the URL and derives the video ID (invalid input is never cached).
    2. Submits usage counters as detached tasks, so hits and misses both count.
    3. Looks up (video ID, language) in the result cache. A cached error is
       returned as a failure without fetching again.
    4. On a miss, fetches once from upstream and classifies any failure.
    5. Writes the outcome to the cache and returns it.

    Cache and counter faults are logged and absorbed. The service holds no
    per-request state and is safe to call concurrently; concurrent misses for
    the same key each fetch upstream.
    """

    def __init__(
        self,
        fetcher: TranscriptFetcher,
        result_cache: Optional[ResultCache] = None,
        usage_tracker: Optional[UsageTracker] = None,
        default_language: str = "en",
    ):
        """
        Initialize the TranscriptService.

        Args:
            fetcher: Upstream transcript source.
            result_cache: Outcome cache. None disables caching (always fetch).
            usage_tracker: Usage counters. None disables tracking.
            default_language: Language used when a request names none.
        """
        self.fetcher = fetcher
        self.result_cache = result_cache
        self.usage_tracker = usage_tracker
        self.default_language = default_language

    async def get_transcript(self, url: str, language: Optional[str] = None) -> str:
        """
        Return the transcript text or raise.

        Raises:
            InvalidInputError: The URL is not a recognised YouTube video URL.
            UpstreamFetchError: The fetch failed now or failed earlier and is cached.
        """
        result = await self._resolve(url, language)
        if result.is_error:
            raise UpstreamFetchError(result.text, result.category or ErrorCategory.UNKNOWN)
        return result.text

    async def get_transcript_result(self, url: str, language: Optional[str] = None) -> TranscriptResult:
        """Return the outcome as a result with an error flag instead of raising."""
        try:
            return await self._resolve(url, language)
        except InvalidInputError as e:
            return TranscriptResult(
                text=e.detail,
                is_error=True,
                category=e.category,
                language=self._language(language),
            )

    async def handle(self, request: TranscriptRequest) -> TranscriptResult:
        return await self.get_transcript_result(request.url, request.language)

    def _language(self, language: Optional[str]) -> str:
        return self.default_language if language is None else language

    async def _resolve(self, url: str, language: Optional[str]) -> TranscriptResult:
        language = self._language(language)

        if not is_valid_youtube_url(url):
            raise InvalidInputError("Invalid YouTube URL provided.")

        video_id = extract_video_id(normalize_youtube_url(url))
        if not video_id:
            logger.error(f"Validated URL yielded no video ID: {url!r}")
            raise InvalidInputError("Could not extract video ID from the URL.")

        with logger.contextualize(video_id=video_id):
            self._track_request(video_id)

            cached = await self._read_cache(video_id, language)
            if cached is not None:
                logger.info(f"Cache hit for {video_id} (lang: {language})")
                return TranscriptResult(
                    text=cached.text,
                    is_error=cached.is_error,
                    category=cached.category if cached.is_error else None,
                    video_id=video_id,
                    language=language,
                    cached=True,
                )

            logger.info(f"Cache miss for {video_id} (lang: {language}). Fetching from YouTube...")
            result = await self._fetch(video_id, language)
            await self._write_cache(result)
            return result

    async def _fetch(self, video_id: str, language: str) -> TranscriptResult:
        try:
            text = await self.fetcher.fetch(video_id, language)
        except Exception as e:
            logger.error(f"Fetching transcript for {video_id} (lang: {language}) failed: {e}")
            classified = classify_error(e)
            if self.usage_tracker is not None:
                self.usage_tracker.track_failure(video_id, error_label(e))
            return TranscriptResult(
                text=classified.message,
                is_error=True,
                category=classified.category,
                video_id=video_id,
                language=language,
            )

        logger.info(f"Fetched transcript for {video_id} ({len(text)} chars)")
        return TranscriptResult(text=text, video_id=video_id, language=language)

    def _track_request(self, video_id: str) -> None:
        if self.usage_tracker is None:
            logger.warning("Counter store not available; skipping usage tracking.")
            return
        self.usage_tracker.track_request(video_id)

    async def _read_cache(self, video_id: str, language: str) -> Optional[CachedOutcome]:
        if self.result_cache is None:
            return None
        try:
            return await self.result_cache.get(video_id, language)
        except Exception as e:
            logger.error(
                f"Cache read error for {video_id} (lang: {language}): {e}. Proceeding to fetch."
            )
            return None

    async def _write_cache(self, result: TranscriptResult) -> None:
        if self.result_cache is None:
            return
        try:
            await self.result_cache.set(
                result.video_id,
                result.language,
                result.text,
                is_error=result.is_error,
                category=result.category,
            )
        except Exception as e:
            logger.error(
                f"Cache write error for {result.video_id} (lang: {result.language}): {e}"
            )
