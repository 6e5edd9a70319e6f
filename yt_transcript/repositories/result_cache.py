from typing import Optional

from loguru import logger
from pydantic import ValidationError

from yt_transcript.core.constants import CacheKeyConfig
from yt_transcript.core.providers.kv_store import ResultStore
from yt_transcript.models import CachedOutcome, ErrorCategory, OutcomeKind
from yt_transcript.services.error_classifier import match_error_message


class ResultCache:
    """
    Repository for classified transcript outcomes, keyed by (video ID, language).

    Outcomes are stored as tagged JSON. Error outcomes get a shorter TTL than
    transcripts so upstream failures are retried once they expire.
    """
    def __init__(self, store: ResultStore, success_ttl_seconds: int, error_ttl_seconds: int):
        """
        Initialize the ResultCache.

        Args:
            store (ResultStore): Backend key-value store.
            success_ttl_seconds (int): Retention for transcripts.
            error_ttl_seconds (int): Retention for error outcomes, strictly shorter.
        """
        if error_ttl_seconds >= success_ttl_seconds:
            raise ValueError("Error TTL must be strictly less than success TTL")
        self.store = store
        self.success_ttl_seconds = success_ttl_seconds
        self.error_ttl_seconds = error_ttl_seconds

    @staticmethod
    def make_key(video_id: str, language: str) -> str:
        return f"{CacheKeyConfig.PREFIX}:{video_id}:{language}"

    async def get(self, video_id: str, language: str) -> Optional[CachedOutcome]:
        """
        Reads the cached outcome for a video and language.

        Store faults are raised to the caller unchanged.

        Returns:
            Optional[CachedOutcome]: The outcome, or None on a miss.
        """
        raw = await self.store.get(self.make_key(video_id, language))
        if raw is None:
            return None
        return self._decode(raw)

    async def set(
        self,
        video_id: str,
        language: str,
        text: str,
        is_error: bool,
        category: Optional[ErrorCategory] = None,
    ) -> None:
        """
        Persists an outcome with the TTL matching its kind.
        """
        outcome = CachedOutcome(
            kind=OutcomeKind.ERROR if is_error else OutcomeKind.SUCCESS,
            text=text,
            category=category if is_error else None,
        )
        ttl = self.error_ttl_seconds if is_error else self.success_ttl_seconds
        await self.store.set(
            self.make_key(video_id, language), outcome.model_dump_json(), ttl_seconds=ttl
        )

    @staticmethod
    def _decode(raw: str) -> CachedOutcome:
        try:
            return CachedOutcome.model_validate_json(raw)
        except ValidationError:
            pass

        # Untagged value written before outcomes carried their kind
        category = match_error_message(raw)
        if category is None:
            return CachedOutcome(kind=OutcomeKind.SUCCESS, text=raw)
        logger.debug(f"Legacy cached error recognised as {category.value}")
        return CachedOutcome(kind=OutcomeKind.ERROR, text=raw, category=category)
