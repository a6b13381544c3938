"""Fixed-rate request pacer for the statistics provider.

Calls are issued strictly one at a time, in submission order. After a call
settles (either way) the pacer waits ``window / rate`` seconds before starting
the next one, so consecutive call starts are always at least that far apart.
This is a fixed-spacing limiter rather than a token bucket: with N calls per
window it only matches a true sliding-window count when request latency is
small next to the spacing.
"""

import asyncio
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Deque, Dict, Optional

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, Optional[Dict[str, Any]]], Awaitable[Any]]


@dataclass
class PacerRequest:
    endpoint: str
    params: Optional[Dict[str, Any]]
    future: asyncio.Future = field(repr=False)


class RequestPacer:
    def __init__(self, fetcher: Fetcher, rate: int = 180, window: float = 1.0):
        if rate <= 0 or window <= 0:
            raise ValueError("rate and window must be positive")
        self._fetcher = fetcher
        self.rate = rate
        self.window = window
        self._queue: Deque[PacerRequest] = deque()
        self._drain_task: Optional[asyncio.Task] = None
        self._in_flight: Optional[PacerRequest] = None

    @property
    def spacing(self) -> float:
        return self.window / self.rate

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def idle(self) -> bool:
        return not self._queue and (
            self._drain_task is None or self._drain_task.done()
        )

    def submit(
        self, endpoint: str, params: Optional[Dict[str, Any]] = None
    ) -> asyncio.Future:
        """Queue a call and return a future for its parsed response."""
        loop = asyncio.get_running_loop()
        request = PacerRequest(endpoint=endpoint, params=params, future=loop.create_future())
        self._queue.append(request)
        if self._drain_task is None or self._drain_task.done():
            self._drain_task = loop.create_task(self._drain())
        return request.future

    async def fetch(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.submit(endpoint, params)

    async def _drain(self) -> None:
        while self._queue:
            request = self._queue.popleft()
            if request.future.cancelled():
                continue

            logger.debug(f"Paced request: {request.endpoint} ({len(self._queue)} queued)")
            self._in_flight = request
            try:
                result = await self._fetcher(request.endpoint, request.params)
            except Exception as e:
                if not request.future.done():
                    request.future.set_exception(e)
            else:
                if not request.future.done():
                    request.future.set_result(result)
            finally:
                self._in_flight = None

            # keep the spacing even if the queue is empty right now, a
            # submission arriving during the wait must not start early
            await asyncio.sleep(self.spacing)

    async def aclose(self) -> None:
        """Cancel queued and in-flight requests and stop the drain task."""
        if self._in_flight is not None and not self._in_flight.future.done():
            self._in_flight.future.cancel()
        while self._queue:
            request = self._queue.popleft()
            if not request.future.done():
                request.future.cancel()
        if self._drain_task is not None and not self._drain_task.done():
            self._drain_task.cancel()
            try:
                await self._drain_task
            except asyncio.CancelledError:
                pass
        self._drain_task = None
