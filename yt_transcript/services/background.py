"""
Detached (fire-and-forget) task runner.
"""
import asyncio
from collections import deque
from typing import Callable, Coroutine, Optional

from loguru import logger

ErrorSink = Callable[[str, BaseException], None]


def log_error_sink(name: str, exc: BaseException) -> None:
    logger.error(f"Background task '{name}' failed: {exc}")


class BackgroundTaskRunner:
    """
    Runs coroutines as detached asyncio tasks.

    The caller never awaits them. Strong references are kept until each task
    finishes, and any failure is handed to ``error_sink`` instead of being
    raised. ``attempted`` keeps the names of the most recently submitted
    tasks, at most ``history_size`` of them.
    """

    def __init__(self, error_sink: Optional[ErrorSink] = None, history_size: int = 100) -> None:
        self.error_sink = error_sink or log_error_sink
        self.attempted: deque[str] = deque(maxlen=history_size)
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def submit(self, name: str, coro: Coroutine) -> asyncio.Task:
        """Schedule ``coro`` on the running loop and return immediately."""
        self.attempted.append(name)
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            try:
                self.error_sink(task.get_name(), exc)
            except Exception as sink_error:
                logger.error(f"Error sink failed for '{task.get_name()}': {sink_error}")

    async def drain(self) -> None:
        """Wait for all pending tasks. Failures still go to the error sink."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
