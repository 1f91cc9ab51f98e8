"""
Color state for the hue wheel.

``ColorState`` holds hue, saturation and the "third" channel (lightness in
HSL mode, value in HSV mode) and keeps a derived 8-bit RGB triple in sync.
``ChangeEvent`` is the immutable snapshot handed to change callbacks.

>>> from huewheel.colors import ColorState
>>> state = ColorState(hue=370, saturation=1.5, third=-0.2)
>>> state.hue, state.saturation, state.third
(10.0, 1.0, 0.0)
"""

from .color_state import ColorState
from .change_event import ChangeEvent

__all__ = ['ColorState', 'ChangeEvent']
