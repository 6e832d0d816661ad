"""Tick sources that drive playback."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TickCallback = Callable[[float], None]

# Cap delta time to prevent a long stall from skipping whole runs
MAX_DT_MS = 250.0


class CallHandle:
    """Handle for a deferred callback."""

    def __init__(self, callback: Callable[[], None]):
        self._callback = callback
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Prevent the callback from running."""
        self._cancelled = True

    def run(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._callback()


class Ticker:
    """Delivers elapsed time to subscribers on a regular cadence.

    Subclasses decide where the time comes from. Deferred callbacks run at
    the start of the next tick, before subscribers.
    """

    def __init__(self):
        self._subscribers: list[TickCallback] = []
        self._pending: list[CallHandle] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @property
    def pending_count(self) -> int:
        return sum(1 for handle in self._pending if not handle.cancelled)

    def subscribe(self, callback: TickCallback) -> Callable[[], None]:
        """Subscribe to ticks.

        Args:
            callback: Called with the elapsed milliseconds on each tick.

        Returns:
            An unsubscribe function. Calling it twice is harmless.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def call_soon(self, callback: Callable[[], None]) -> CallHandle:
        """Run ``callback`` on the next tick."""
        handle = CallHandle(callback)
        self._pending.append(handle)
        return handle

    def tick(self, dt_ms: float) -> None:
        """Process a single tick.

        Args:
            dt_ms: Elapsed time in milliseconds.
        """
        # Subscriptions made by deferred callbacks start on the next tick
        subscribers = list(self._subscribers)
        pending, self._pending = self._pending, []
        for handle in pending:
            self._invoke(handle.run)

        for callback in subscribers:
            # Skip callbacks removed by an earlier subscriber this tick
            if callback in self._subscribers:
                self._invoke(callback, dt_ms)

    def _invoke(self, callback: Callable[..., None], *args: float) -> None:
        try:
            callback(*args)
        except Exception:
            logger.exception("Tick callback %r failed", callback)


class ManualTicker(Ticker):
    """Ticker advanced explicitly by the caller.

    Used for deterministic playback and tests.
    """

    def __init__(self):
        super().__init__()
        self.elapsed_ms = 0.0

    def advance(self, dt_ms: float) -> None:
        """Advance time by ``dt_ms`` in a single tick."""
        self.elapsed_ms += dt_ms
        self.tick(dt_ms)

    def advance_by(self, total_ms: float, step_ms: float = 1000 / 60) -> None:
        """Advance time in fixed steps until ``total_ms`` has elapsed."""
        remaining = total_ms
        while remaining > 1e-9:
            dt = min(step_ms, remaining)
            self.advance(dt)
            remaining -= dt

    def flush(self) -> None:
        """Run deferred callbacks without advancing time."""
        self.tick(0.0)


class AsyncioTicker(Ticker):
    """Ticker driven by an asyncio loop at a target rate."""

    def __init__(self, target_fps: int = 60):
        """Initialize the ticker.

        Args:
            target_fps: Target ticks per second.
        """
        super().__init__()
        self.target_fps = target_fps
        self.target_frame_time = 1.0 / target_fps

        self._running = False
        self._last_time = 0.0
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> asyncio.Task:
        """Start ticking on the running event loop.

        Returns:
            The task running the loop.
        """
        if self._task is None or self._task.done():
            self._task = asyncio.get_running_loop().create_task(self.run())
        return self._task

    def stop(self) -> None:
        """Stop ticking after the current tick."""
        self._running = False

    async def close(self) -> None:
        """Stop ticking and wait for the loop task to exit."""
        self.stop()
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

    def process_frame(self) -> float:
        """Process a single tick with timing.

        Returns:
            Milliseconds delivered to subscribers.
        """
        current_time = time.perf_counter()
        dt_ms = (current_time - self._last_time) * 1000
        self._last_time = current_time

        if dt_ms > MAX_DT_MS:
            dt_ms = MAX_DT_MS

        self.tick(dt_ms)
        return dt_ms

    async def run(self) -> None:
        """Run the tick loop until stopped."""
        self._running = True
        self._last_time = time.perf_counter()
        logger.debug("Ticker started at %d fps", self.target_fps)

        while self._running:
            frame_start = time.perf_counter()

            self.process_frame()

            # Sleep the rest of the frame to hold the target rate
            frame_time = time.perf_counter() - frame_start
            sleep_time = max(0, self.target_frame_time - frame_time)
            await asyncio.sleep(sleep_time)

        logger.debug("Ticker stopped")
