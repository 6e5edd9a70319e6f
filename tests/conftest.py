"""
Shared pytest fixtures and configuration.
"""
import pytest
from unittest.mock import AsyncMock

from yt_transcript.core.providers import (
    MemoryCounterStore,
    MemoryResultStore,
    TranscriptFetcher,
)
from yt_transcript.repositories.result_cache import ResultCache
from yt_transcript.repositories.usage import UsageRepository
from yt_transcript.services.background import BackgroundTaskRunner
from yt_transcript.services.transcript import TranscriptService
from yt_transcript.services.usage import UsageTracker


@pytest.fixture
def fetcher():
    """Upstream fetcher that returns a fixed transcript."""
    fetcher = AsyncMock(spec=TranscriptFetcher)
    fetcher.fetch.return_value = "Hello world."
    return fetcher


@pytest.fixture
def result_store():
    return MemoryResultStore(max_entries=100)


@pytest.fixture
def counter_store():
    return MemoryCounterStore(max_entries=100)


@pytest.fixture
def background_errors():
    """Failures reported by detached tasks, as (task name, exception) pairs."""
    return []


@pytest.fixture
def runner(background_errors):
    return BackgroundTaskRunner(
        error_sink=lambda name, exc: background_errors.append((name, exc))
    )


@pytest.fixture
def result_cache(result_store):
    return ResultCache(result_store, success_ttl_seconds=3600, error_ttl_seconds=60)


@pytest.fixture
def usage_repository(counter_store):
    return UsageRepository(counter_store)


@pytest.fixture
def usage_tracker(usage_repository, runner):
    return UsageTracker(usage_repository, runner)


@pytest.fixture
def transcript_service(fetcher, result_cache, usage_tracker):
    return TranscriptService(
        fetcher=fetcher,
        result_cache=result_cache,
        usage_tracker=usage_tracker,
    )
