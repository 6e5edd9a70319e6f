"""
Transcript fetcher backed by youtube-transcript-api.
"""
import asyncio
from typing import Optional

from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base
from youtube_transcript_api import (
    InvalidVideoId,
    IpBlocked,
    NoTranscriptFound,
    RequestBlocked,
    TranscriptsDisabled,
    VideoUnavailable,
    VideoUnplayable,
    YouTubeRequestFailed,
    YouTubeTranscriptApi,
)
from youtube_transcript_api.proxies import GenericProxyConfig

from yt_transcript.core.exceptions import (
    NoTranscriptError,
    ServiceBusyError,
    TranscriptFetchError,
    TranscriptsDisabledError,
    VideoNotFoundError,
)
from yt_transcript.core.providers.transcript_fetcher import TranscriptFetcher
from yt_transcript.models.proxy import ProxyConfig


def translate_api_error(exc: Exception) -> TranscriptFetchError:
    """Map a youtube-transcript-api exception onto a typed fetch error."""
    name = type(exc).__name__
    message = str(exc) or name
    if isinstance(exc, (VideoUnavailable, VideoUnplayable, InvalidVideoId)):
        return VideoNotFoundError(message, name=name)
    if isinstance(exc, TranscriptsDisabled):
        return TranscriptsDisabledError(message, name=name)
    if isinstance(exc, NoTranscriptFound):
        return NoTranscriptError(message, name=name)
    if isinstance(exc, (RequestBlocked, IpBlocked, YouTubeRequestFailed)):
        return ServiceBusyError(message, name=name)
    return TranscriptFetchError(message, name=name)


class YouTubeTranscriptFetcher(TranscriptFetcher):
    """
    Fetches transcripts with youtube-transcript-api.

    The blocking client runs in a worker thread and every attempt is bounded
    by ``timeout_seconds``; a timeout is reported as a transient failure.
    Only transient failures are retried, and only when ``attempts`` > 1.
    """

    def __init__(
        self,
        timeout_seconds: float = 30.0,
        attempts: int = 1,
        proxy: Optional[ProxyConfig] = None,
        retry_wait: Optional[wait_base] = None,
    ):
        self.timeout_seconds = timeout_seconds
        self.attempts = attempts
        self.proxy = proxy
        self.retry_wait = retry_wait or wait_exponential(multiplier=1, min=2, max=10)

    def _build_client(self) -> YouTubeTranscriptApi:
        proxy_config = None
        if self.proxy is not None:
            proxy_config = GenericProxyConfig(
                http_url=self.proxy.http, https_url=self.proxy.https
            )
        return YouTubeTranscriptApi(proxy_config=proxy_config)

    def _fetch_sync(self, video_id: str, language: str) -> str:
        try:
            fetched = self._build_client().fetch(video_id, languages=[language])
        except Exception as e:
            raise translate_api_error(e) from e
        return " ".join(
            snippet.text.strip() for snippet in fetched if snippet.text and snippet.text.strip()
        )

    async def _fetch_once(self, video_id: str, language: str) -> str:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._fetch_sync, video_id, language),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise ServiceBusyError(
                f"Transcript fetch timed out after {self.timeout_seconds} seconds",
                name="FetchTimeout",
            ) from e

    def _log_retry(self, retry_state: RetryCallState) -> None:
        logger.warning(
            f"Transient transcript fetch failure "
            f"(attempt {retry_state.attempt_number}/{self.attempts}): "
            f"{retry_state.outcome.exception()}"
        )

    async def fetch(self, video_id: str, language: str) -> str:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.attempts),
            wait=self.retry_wait,
            retry=retry_if_exception_type(ServiceBusyError),
            before_sleep=self._log_retry,
            reraise=True,
        )
        return await retrying(self._fetch_once, video_id, language)
