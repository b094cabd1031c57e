import asyncio
from typing import Callable, Optional


class DebounceTimer:
    """A single cancellable delayed call on the running event loop.

    ``schedule`` always cancels the pending call first, so only the most
    recently scheduled callback can fire. ``cancel`` is idempotent.
    """

    def __init__(self):
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._fire_after(delay, callback))

    async def _fire_after(self, delay: float, callback: Callable[[], None]) -> None:
        await asyncio.sleep(delay)
        callback()

    def cancel(self) -> bool:
        """Cancel the pending call. Returns True if one was pending."""
        if not self.pending:
            return False
        self._task.cancel()
        self._task = None
        return True

    async def wait(self) -> None:
        """Wait until the pending call fires or is cancelled."""
        if self._task is not None:
            await asyncio.wait({self._task})
