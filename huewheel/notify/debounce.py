"""Cancellable deferred invocation with last-call-wins semantics.

Two ways to drive it:

- **Poll mode** (default): the host event loop calls :meth:`Debouncer.poll`
  once per tick; the pending call fires once its quiet period has elapsed.
- **Scheduler mode**: pass a ``call_later(delay, fn)`` callable (for example
  ``asyncio.get_running_loop().call_later``) returning a handle with a
  ``cancel()`` method; the debouncer arms and cancels through it.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.012


class CancelHandle(Protocol):
    def cancel(self) -> Any: ...


CallLater = Callable[[float, Callable[[], None]], CancelHandle]


@dataclass
class _PendingCall:
    fn: Callable[[], None]
    timestamp: float
    handle: Optional[CancelHandle] = None


class Debouncer:
    def __init__(
        self,
        delay: float = DEFAULT_DELAY,
        call_later: Optional[CallLater] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.delay = max(0.0, float(delay))
        self._call_later = call_later
        self._clock = clock
        self._pending: Optional[_PendingCall] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def schedule(self, fn: Callable[[], None]) -> None:
        """Arm ``fn``, superseding any call that has not fired yet."""
        if self._pending is not None:
            logger.debug("Superseding pending call scheduled at %.4f", self._pending.timestamp)
        self.cancel()
        entry = _PendingCall(fn=fn, timestamp=self._clock())
        self._pending = entry
        if self._call_later is not None:
            entry.handle = self._call_later(self.delay, lambda: self._fire(entry))

    def cancel(self) -> None:
        entry, self._pending = self._pending, None
        if entry is not None and entry.handle is not None:
            entry.handle.cancel()

    def poll(self) -> bool:
        """Fire the pending call if its delay has elapsed. Returns True if it fired."""
        entry = self._pending
        if entry is None or self._call_later is not None:
            return False
        if self._clock() - entry.timestamp < self.delay:
            return False
        self._fire(entry)
        return True

    def flush(self) -> bool:
        """Fire the pending call now, regardless of the remaining delay."""
        entry = self._pending
        if entry is None:
            return False
        if entry.handle is not None:
            entry.handle.cancel()
        self._fire(entry)
        return True

    def _fire(self, entry: _PendingCall) -> None:
        # A stale handle from a superseded call must not fire.
        if self._pending is not entry:
            return
        self._pending = None
        entry.fn()
