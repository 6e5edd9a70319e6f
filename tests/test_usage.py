"""
Unit tests for usage counters and the detached task runner.
"""
import asyncio
from datetime import date

import pytest

from yt_transcript.core.exceptions import StoreError
from yt_transcript.repositories.usage import UsageRepository
from yt_transcript.services.background import BackgroundTaskRunner
from yt_transcript.services.usage import UsageTracker


def test_key_layout(counter_store):
    repo = UsageRepository(counter_store, today=lambda: date(2024, 3, 9))
    assert repo.daily_key() == "requests:daily:2024-03-09"
    assert repo.video_key("abc123") == "requests:video:abc123"
    assert repo.error_key("FetchError") == "errors:daily:2024-03-09:FetchError"


@pytest.mark.asyncio
async def test_daily_counts_are_per_day(counter_store):
    day = {"value": date(2024, 3, 9)}
    repo = UsageRepository(counter_store, today=lambda: day["value"])

    await repo.increment_daily()
    await repo.increment_daily()
    day["value"] = date(2024, 3, 10)
    await repo.increment_daily()

    assert await repo.get_daily_count(date(2024, 3, 9)) == 2
    assert await repo.get_daily_count(date(2024, 3, 10)) == 1


@pytest.mark.asyncio
async def test_runner_does_not_block_caller(runner):
    gate = asyncio.Event()

    async def wait_for_gate():
        await gate.wait()

    runner.submit("blocked", wait_for_gate())
    assert runner.pending == 1

    gate.set()
    await runner.drain()
    assert runner.pending == 0
    assert list(runner.attempted) == ["blocked"]


@pytest.mark.asyncio
async def test_runner_reports_failures_to_sink(runner, background_errors):
    async def boom():
        raise StoreError("down")

    runner.submit("boom", boom())
    await runner.drain()

    assert len(background_errors) == 1
    name, exc = background_errors[0]
    assert name == "boom"
    assert isinstance(exc, StoreError)


@pytest.mark.asyncio
async def test_runner_survives_failing_sink():
    def broken_sink(name, exc):
        raise RuntimeError("sink broke")

    runner = BackgroundTaskRunner(error_sink=broken_sink)

    async def boom():
        raise StoreError("down")

    runner.submit("boom", boom())
    await runner.drain()
    assert runner.pending == 0


@pytest.mark.asyncio
async def test_tracker_counts_request(usage_tracker, usage_repository, runner):
    usage_tracker.track_request("abc123")
    await usage_tracker.drain()

    assert await usage_repository.get_daily_count() == 1
    assert await usage_repository.get_video_count("abc123") == 1
    assert len(runner.attempted) == 2


@pytest.mark.asyncio
async def test_tracker_records_failure(usage_tracker, usage_repository, counter_store):
    usage_tracker.track_failure("abc123", "VideoNotFoundError")
    await usage_tracker.drain()

    assert await counter_store.get(usage_repository.error_key("VideoNotFoundError")) == 1
    assert await usage_repository.get_daily_count() == 0


def test_tracker_creates_default_runner(usage_repository):
    tracker = UsageTracker(usage_repository)
    assert isinstance(tracker.runner, BackgroundTaskRunner)


@pytest.mark.asyncio
async def test_runner_history_is_bounded():
    runner = BackgroundTaskRunner(history_size=3)

    async def noop():
        return None

    for i in range(10):
        runner.submit(f"task {i}", noop())
    await runner.drain()

    assert list(runner.attempted) == ["task 7", "task 8", "task 9"]
    assert runner.pending == 0


@pytest.mark.asyncio
async def test_tracker_history_stays_bounded_over_many_requests(usage_repository):
    tracker = UsageTracker(usage_repository, BackgroundTaskRunner(history_size=50))

    for _ in range(500):
        tracker.track_request("abc123")
    await tracker.drain()

    assert len(tracker.runner.attempted) == 50
    assert await usage_repository.get_video_count("abc123") == 500
