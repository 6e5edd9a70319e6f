"""
Abstract base classes for the key-value stores used by the pipeline.

The result store persists classified transcript outcomes; the counter store
holds best-effort usage counters. Concrete backends (in-memory, Redis,
Cloudflare KV) must implement these interfaces and raise ``StoreError`` (or
any exception) on backend faults; callers treat every fault as non-fatal.
"""
from abc import ABC, abstractmethod
from typing import Optional


class ResultStore(ABC):
    """
    Abstract interface for the transcript result store.

    Example:
        store = MemoryResultStore(max_entries=1000)
        await store.set("transcript:abc123:en", payload, ttl_seconds=3600)
        payload = await store.get("transcript:abc123:en")
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Read a stored value.

        Args:
            key: Store key.

        Returns:
            The stored string, or None when absent or expired.
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        """
        Write a value.

        Args:
            key: Store key.
            value: String payload.
            ttl_seconds: Retention hint. None keeps the value until evicted.
        """
        ...


class CounterStore(ABC):
    """Abstract interface for increment-only usage counters."""

    @abstractmethod
    async def increment(self, key: str, ttl_seconds: Optional[int] = None) -> int:
        """
        Increment a counter by one.

        The TTL applies from the first increment of the key; later increments
        do not extend it.

        Returns:
            The counter value after the increment.
        """
        ...

    @abstractmethod
    async def get(self, key: str) -> int:
        """Return the current counter value (0 when absent)."""
        ...
