from .debounce import Debouncer, CallLater, CancelHandle, DEFAULT_DELAY
from .notifier import ChangeNotifier, ChangeCallback

__all__ = [
    "Debouncer",
    "CallLater",
    "CancelHandle",
    "DEFAULT_DELAY",
    "ChangeNotifier",
    "ChangeCallback",
]
