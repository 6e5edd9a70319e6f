from typing import Optional

from loguru import logger

from yt_transcript.models import UsageEvent
from yt_transcript.repositories.usage import UsageRepository
from yt_transcript.services.background import BackgroundTaskRunner


class UsageTracker:
    """
    Best-effort usage tracking.

    Every increment is submitted to the background runner and never awaited,
    so counter faults cannot delay or fail a transcript request.
    """

    def __init__(self, repository: UsageRepository, runner: Optional[BackgroundTaskRunner] = None):
        self.repository = repository
        self.runner = runner or BackgroundTaskRunner()

    def track_request(self, video_id: str) -> None:
        """Counts one request globally for today and once for the video."""
        self.runner.submit("increment daily requests", self.repository.increment_daily())
        self.runner.submit(
            f"increment requests for {video_id}", self.repository.increment_video(video_id)
        )

    def track_failure(self, video_id: str, label: str) -> None:
        """Counts a failed upstream fetch under its failure label."""
        event = UsageEvent(video_id=video_id, success=False, label=label)
        logger.info(f"Recording failed fetch for {video_id}: {event.label}")
        self.runner.submit(f"record failure for {video_id}", self.repository.record_event(event))

    async def drain(self) -> None:
        await self.runner.drain()
