"""
Pointer and keyboard interaction for the hue wheel.

>>> controller.on_pointer_down((x, y))   # press on the hue knob
>>> controller.on_pointer_move((x2, y2)) # hue (and saturation) follow the pointer
>>> controller.on_pointer_up()           # back to Mode.IDLE
"""

from .controller import InteractionController, CURSORS
from .keys import KeyCommand, key_bindings
from .state import HitRegion, InteractionState, Mode

__all__ = [
    # State machine
    'InteractionController',
    'InteractionState',
    'Mode',
    # Hit testing
    'HitRegion',
    'CURSORS',
    # Keyboard
    'KeyCommand',
    'key_bindings',
]
