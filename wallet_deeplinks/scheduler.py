# wallet_deeplinks/scheduler.py
import asyncio
import logging
from typing import Any, Callable, Coroutine, Optional, Set

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[BaseException], None]


class Scheduler:
    """Runs deferred callbacks and fire-and-forget tasks on one asyncio loop.

    Nothing launched here reports back to whoever launched it: a failed task
    is logged and, if given, handed to its on_error callback.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._tasks: Set[asyncio.Task] = set()
        self._deferred = 0

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def defer(self, fn: Callable[..., Any], *args: Any) -> None:
        """Run fn once the loop is done with what is already queued."""
        self._deferred += 1
        self.loop.call_soon(self._run_deferred, fn, args)

    def _run_deferred(self, fn, args) -> None:
        self._deferred -= 1
        try:
            fn(*args)
        except Exception:
            logger.exception("deferred call %r failed", fn)

    def spawn(self, coro: Coroutine[Any, Any, Any], label: str, on_error: Optional[ErrorHandler] = None) -> asyncio.Task:
        task = self.loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(lambda t: self._finished(t, label, on_error))
        return task

    def _finished(self, task: asyncio.Task, label: str, on_error: Optional[ErrorHandler]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is None:
            return
        logger.error("%s failed: %s", label, exc, exc_info=exc)
        if on_error:
            try:
                on_error(exc)
            except Exception:
                logger.exception("error handler for %s failed", label)

    @property
    def pending(self) -> int:
        return len(self._tasks) + self._deferred

    async def drain(self) -> None:
        """Wait until every deferred call and spawned task has finished."""
        while self.pending:
            if self._tasks:
                await asyncio.gather(*list(self._tasks), return_exceptions=True)
            await asyncio.sleep(0)
