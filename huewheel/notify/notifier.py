from __future__ import annotations

import logging
from typing import Callable, Optional

from ..colors import ChangeEvent
from .debounce import Debouncer

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[ChangeEvent], object]


class ChangeNotifier:
    """
    Delivers debounced :class:`ChangeEvent` snapshots to a single callback.

    Each :meth:`notify` replaces the pending snapshot, so a burst of updates
    within one debounce window produces one callback carrying the last state.
    """

    def __init__(self, callback: Optional[ChangeCallback] = None, debouncer: Optional[Debouncer] = None) -> None:
        self.callback = callback
        self.debouncer = debouncer if debouncer is not None else Debouncer()
        self.dispatched = 0

    def notify(self, event: ChangeEvent) -> None:
        if self.callback is None:
            self.debouncer.cancel()
            return
        self.debouncer.schedule(lambda: self._dispatch(event))

    def _dispatch(self, event: ChangeEvent) -> None:
        callback = self.callback
        if callback is None:
            return
        self.dispatched += 1
        logger.debug("Dispatching change event #%d: %s", self.dispatched, event)
        try:
            callback(event)
        except Exception:
            logger.exception("Change callback raised; event dropped")

    def poll(self) -> bool:
        return self.debouncer.poll()

    def flush(self) -> bool:
        return self.debouncer.flush()

    def cancel(self) -> None:
        self.debouncer.cancel()

    @property
    def pending(self) -> bool:
        return self.debouncer.pending
