"""
Motion session - consumer handle on a camera's motion event pipeline.

Answers instantaneous questions ("is motion active now?") from the queued
backlog, and temporal ones ("has motion been stopped for at least N
seconds?") by racing a timer against the next opposite status.
"""

import asyncio
import logging
from typing import Optional, Union

from ..errors import CamlinkError, SessionClosed
from .status import MotionKind, MotionStatus, now

logger = logging.getLogger("camlink.motion.session")

PipelineItem = Union[MotionStatus, CamlinkError]


class MotionSession:
    """
    Handle on the motion events coming from one camera channel.

    The session owns the background listener task. Closing the session,
    leaving its `async with` block, or garbage-collecting it cancels the
    listener wherever it is suspended.

    Methods must be driven from a single task at a time. Any query may
    raise ConnectionLost or SessionClosed, meaning motion information is
    no longer available (not that motion is absent).
    """

    def __init__(self, task: asyncio.Task, queue: asyncio.Queue):
        """
        Initialize the session.

        Args:
            task: Running listener task that feeds the queue
            queue: Bounded queue of MotionStatus values or terminal errors
        """
        self._task = task
        self._queue = queue
        self._last_update = MotionStatus.no_change()
        self._failure: Optional[CamlinkError] = None
        self._closed = False

    @property
    def last_update(self) -> MotionStatus:
        """Most recent status observed by a query."""
        return self._last_update

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def failure(self) -> Optional[CamlinkError]:
        """The error that ended this session, if any."""
        return self._failure

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        """
        Stop the listener task immediately.

        Any backlog is discarded. A caller blocked in next() or a debounce
        wait is woken with SessionClosed.
        """
        if self._closed:
            return
        self._closed = True

        if not self._task.done():
            self._task.cancel()

        while not self._queue.empty():
            self._queue.get_nowait()
        self._queue.put_nowait(SessionClosed("Motion session closed"))
        logger.info("Motion session closed")

    async def aclose(self) -> None:
        """Close the session and wait until the listener has released its subscription."""
        self.close()
        try:
            await self._task
        except asyncio.CancelledError:
            pass

    async def __aenter__(self) -> "MotionSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __del__(self):
        task = getattr(self, "_task", None)
        if task is None or task.done():
            return
        if task.get_loop().is_closed():
            return
        task.cancel()

    # ------------------------------------------------------------------ #
    # Instantaneous queries
    # ------------------------------------------------------------------ #

    def _check_open(self) -> None:
        if self._failure is not None:
            raise self._failure
        if self._closed:
            raise SessionClosed("Motion session closed")

    def _unwrap(self, item: PipelineItem) -> MotionStatus:
        if isinstance(item, CamlinkError):
            if self._failure is None and not self._closed:
                logger.warning("Motion session failed: %s", item)
                self._failure = item
            raise item
        return item

    def drain(self) -> list[MotionStatus]:
        """
        Consume all queued statuses without waiting.

        Returns:
            Statuses in arrival order; empty when nothing is queued

        Raises:
            ConnectionLost: If the listener reported a transport failure
            SessionClosed: If the session or its listener has ended
        """
        self._check_open()

        results: list[MotionStatus] = []
        while True:
            try:
                item = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                break
            results.append(self._unwrap(item))

        if not results and self._task.done():
            raise SessionClosed("Motion listener is no longer running")

        if results:
            self._last_update = results[-1]
        return results

    def is_motion(self) -> Optional[bool]:
        """
        Whether motion is currently detected.

        Returns:
            None if no motion information has been received yet
        """
        self.drain()
        if self._last_update.kind is MotionKind.START:
            return True
        if self._last_update.kind is MotionKind.STOP:
            return False
        return None

    def is_motion_within(self, window: float) -> Optional[bool]:
        """
        Whether motion is active or stopped less than `window` seconds ago.

        Returns:
            None if no motion information has been received yet
        """
        self.drain()
        if self._last_update.kind is MotionKind.START:
            return True
        if self._last_update.kind is MotionKind.STOP:
            return (now() - self._last_update.timestamp) < window
        return None

    async def next(self) -> MotionStatus:
        """
        Wait for a motion status.

        If statuses are already queued, the newest one is returned and the
        older ones are skipped; use drain() to see every status.
        """
        statuses = self.drain()
        if statuses:
            return statuses[-1]

        status = self._unwrap(await self._queue.get())
        self._last_update = status
        return status

    # ------------------------------------------------------------------ #
    # Debounce
    # ------------------------------------------------------------------ #

    async def await_start(self, duration: float = 0.0) -> None:
        """Wait until motion has been active for at least `duration` seconds."""
        await self._await_state(MotionKind.START, duration)

    async def await_stop(self, duration: float = 0.0) -> None:
        """Wait until motion has been stopped for at least `duration` seconds."""
        await self._await_state(MotionKind.STOP, duration)

    async def _next_transition(self, kind: MotionKind) -> MotionStatus:
        while True:
            status = await self.next()
            if status.kind is kind:
                return status

    async def _await_state(self, target: MotionKind, duration: float) -> None:
        # Only the backlog counts; an empty one always waits for a new status
        statuses = self.drain()
        last: Optional[MotionStatus] = statuses[-1] if statuses else None

        while True:
            if last is not None and last.kind is target:
                elapsed = now() - last.timestamp
                if duration <= 0 or elapsed >= duration:
                    return

                try:
                    interrupt = await asyncio.wait_for(
                        self._next_transition(target.opposite()),
                        timeout=duration - elapsed,
                    )
                except asyncio.TimeoutError:
                    # Held for the remaining window
                    return
                logger.debug(
                    "Motion %s interrupted by %s; restarting debounce",
                    target.value,
                    interrupt.kind.value,
                )

            last = await self.next()
