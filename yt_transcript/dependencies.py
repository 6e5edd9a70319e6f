"""
Factory functions wiring the transcript pipeline from settings.

Each collaborator is created once per process. Disabled stores are returned
as None and the pipeline runs without them.
"""
from functools import lru_cache
from typing import Optional

from loguru import logger

from yt_transcript.core.config import settings
from yt_transcript.core.providers import (
    CounterStore,
    MemoryCounterStore,
    MemoryResultStore,
    ResultStore,
    TranscriptFetcher,
)
from yt_transcript.core.providers.youtube_fetcher import YouTubeTranscriptFetcher
from yt_transcript.repositories.result_cache import ResultCache
from yt_transcript.repositories.usage import UsageRepository
from yt_transcript.services.proxy import ProxyService
from yt_transcript.services.transcript import TranscriptService
from yt_transcript.services.usage import UsageTracker


# =============================================================================
# PROVIDER FACTORIES
# =============================================================================

@lru_cache
def get_result_store() -> Optional[ResultStore]:
    if not settings.CACHE_ENABLED:
        logger.warning("Result cache disabled; every request will fetch upstream.")
        return None
    return MemoryResultStore(max_entries=settings.CACHE_MAX_ENTRIES)


@lru_cache
def get_counter_store() -> Optional[CounterStore]:
    if not settings.USAGE_TRACKING_ENABLED:
        return None
    return MemoryCounterStore()


@lru_cache
def get_transcript_fetcher() -> TranscriptFetcher:
    return YouTubeTranscriptFetcher(
        timeout_seconds=settings.TRANSCRIPT_FETCH_TIMEOUT_SECONDS,
        attempts=settings.TRANSCRIPT_FETCH_ATTEMPTS,
        proxy=ProxyService.get_proxies(),
    )


# =============================================================================
# SERVICE FACTORIES
# =============================================================================

def create_transcript_service(
    fetcher: TranscriptFetcher,
    result_store: Optional[ResultStore],
    counter_store: Optional[CounterStore],
) -> TranscriptService:
    """
    Assemble a TranscriptService from explicit collaborators.

    Args:
        fetcher: Upstream transcript source.
        result_store: Store for cached outcomes, or None for no caching.
        counter_store: Store for usage counters, or None for no tracking.
    """
    result_cache = None
    if result_store is not None:
        result_cache = ResultCache(
            result_store,
            success_ttl_seconds=settings.CACHE_SUCCESS_TTL_SECONDS,
            error_ttl_seconds=settings.CACHE_ERROR_TTL_SECONDS,
        )

    usage_tracker = None
    if counter_store is not None:
        usage_tracker = UsageTracker(
            UsageRepository(counter_store, daily_ttl_seconds=settings.COUNTER_TTL_SECONDS)
        )

    return TranscriptService(
        fetcher=fetcher,
        result_cache=result_cache,
        usage_tracker=usage_tracker,
        default_language=settings.DEFAULT_LANGUAGE,
    )


@lru_cache
def get_transcript_service() -> TranscriptService:
    return create_transcript_service(
        fetcher=get_transcript_fetcher(),
        result_store=get_result_store(),
        counter_store=get_counter_store(),
    )
