"""
Collaborator interfaces and their bundled implementations.
"""
from yt_transcript.core.providers.kv_store import CounterStore, ResultStore
from yt_transcript.core.providers.memory_store import MemoryCounterStore, MemoryResultStore
from yt_transcript.core.providers.transcript_fetcher import TranscriptFetcher

__all__ = [
    # Stores
    "ResultStore",
    "CounterStore",
    "MemoryResultStore",
    "MemoryCounterStore",
    # Fetchers
    "TranscriptFetcher",
]
