"""Fixed-interval call throttle for async functions.

Riot personal keys allow 20 requests / 1 s and 100 requests / 2 min per
routing value. Match details are fetched strictly one after another, so
spacing call starts by a fixed interval is enough to stay under both.
"""
from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ThrottleState(Enum):
    IDLE = "idle"
    PENDING = "pending"


class Throttle(Generic[T]):
    """
    Wraps an async callable so that at least ``interval_ms`` separates the
    *start* of one underlying call from the start of the next.

    - Idle, or the interval already elapsed: the call runs immediately.
    - Otherwise the call is deferred until ``last_call + interval``. A call
      that is still waiting is cancelled and replaced by the newer one
      (last call wins); its awaiter gets ``asyncio.CancelledError``.
      Calls that have already started always run to completion.

    This spaces call starts; it does not wait for the previous call to
    finish. Awaiting each call before issuing the next turns it into a plain
    fixed delay between calls, which is how the stats pipeline uses it.
    """

    def __init__(self, fn: Callable[..., Awaitable[T]], interval_ms: float) -> None:
        if interval_ms < 0:
            raise ValueError("interval_ms must be >= 0")
        self._fn = fn
        self._interval = interval_ms / 1000.0
        self._last_call: Optional[float] = None
        self._pending: Optional[asyncio.Task] = None
        self._name = getattr(fn, "__qualname__", None) or repr(fn)

    @property
    def interval_ms(self) -> float:
        return self._interval * 1000.0

    @property
    def last_call(self) -> Optional[float]:
        """Event-loop time at which the last call was started."""
        return self._last_call

    @property
    def state(self) -> ThrottleState:
        if self._pending is not None and not self._pending.done():
            return ThrottleState.PENDING
        return ThrottleState.IDLE

    async def __call__(self, *args: Any, **kwargs: Any) -> T:
        loop = asyncio.get_running_loop()
        now = loop.time()

        if self.state is ThrottleState.IDLE and (
            self._last_call is None or now >= self._last_call + self._interval
        ):
            self._last_call = now
            return await self._fn(*args, **kwargs)

        # A waiting call is due at the same slot the new one takes over.
        self._supersede_pending()
        delay = max(0.0, self._last_call + self._interval - now)
        logger.debug(f"throttle {self._name}: deferring {delay * 1000:.0f}ms")
        self._pending = loop.create_task(self._run_deferred(delay, args, kwargs))
        return await self._pending

    async def _run_deferred(self, delay: float, args: tuple, kwargs: dict) -> T:
        await asyncio.sleep(delay)
        # From here on the call counts as started and can no longer be replaced.
        self._pending = None
        self._last_call = asyncio.get_running_loop().time()
        return await self._fn(*args, **kwargs)

    def _supersede_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            logger.debug(f"throttle {self._name}: dropping superseded call")
            self._pending.cancel()
        self._pending = None


def throttle(fn: Callable[..., Awaitable[T]], interval_ms: float) -> Throttle[T]:
    """Return ``fn`` wrapped in a :class:`Throttle` with the given interval."""
    return Throttle(fn, interval_ms)
