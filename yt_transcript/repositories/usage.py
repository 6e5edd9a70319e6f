from datetime import date, datetime, timezone
from typing import Callable, Optional

from yt_transcript.core.constants import UsageKeyConfig
from yt_transcript.core.providers.kv_store import CounterStore
from yt_transcript.models import UsageEvent


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class UsageRepository:
    """
    Repository for usage counters: requests per UTC day, requests per video,
    and failed fetches per day and failure label.
    """
    def __init__(
        self,
        store: CounterStore,
        daily_ttl_seconds: Optional[int] = None,
        today: Callable[[], date] = utc_today,
    ):
        self.store = store
        self.daily_ttl_seconds = daily_ttl_seconds
        self._today = today

    def _day(self, day: Optional[date] = None) -> str:
        return (day or self._today()).strftime(UsageKeyConfig.DATE_FORMAT)

    def daily_key(self, day: Optional[date] = None) -> str:
        return f"{UsageKeyConfig.DAILY_PREFIX}:{self._day(day)}"

    @staticmethod
    def video_key(video_id: str) -> str:
        return f"{UsageKeyConfig.VIDEO_PREFIX}:{video_id}"

    def error_key(self, label: str, day: Optional[date] = None) -> str:
        return f"{UsageKeyConfig.ERROR_PREFIX}:{self._day(day)}:{label}"

    async def increment_daily(self) -> int:
        return await self.store.increment(self.daily_key(), ttl_seconds=self.daily_ttl_seconds)

    async def increment_video(self, video_id: str) -> int:
        return await self.store.increment(self.video_key(video_id))

    async def record_event(self, event: UsageEvent) -> int:
        """Counts a detailed request event under its day and label."""
        return await self.store.increment(
            self.error_key(event.label), ttl_seconds=self.daily_ttl_seconds
        )

    async def get_daily_count(self, day: Optional[date] = None) -> int:
        return await self.store.get(self.daily_key(day))

    async def get_video_count(self, video_id: str) -> int:
        return await self.store.get(self.video_key(video_id))
