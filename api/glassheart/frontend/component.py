"""Task ownership for front-end components."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine

logger = logging.getLogger(__name__)


class Component:
    """
    Base class for anything that fetches on behalf of a screen.

    Every fetch runs as a task owned by the component. ``close()`` cancels
    whatever is still in flight, so a response arriving after the user has
    navigated away never updates a torn-down component.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()
        self.closed = False

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
        if self.closed:
            coro.close()
            raise RuntimeError(f"{type(self).__name__} is closed")
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def run(self, coro: Coroutine[Any, Any, Any]) -> Any:
        """Run ``coro`` as an owned task and wait for it; None if the component closes first."""
        if self.closed:
            coro.close()
            return None
        task = self.spawn(coro)
        try:
            return await task
        except asyncio.CancelledError:
            if self.closed and task.cancelled():
                return None
            raise

    async def settle(self) -> None:
        """Wait until no owned task is pending, including ones spawned meanwhile."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        pending = list(self._tasks)
        for task in pending:
            task.cancel()
        if pending:
            logger.debug(f"{type(self).__name__}: cancelled {len(pending)} in-flight task(s)")
            await asyncio.gather(*pending, return_exceptions=True)
