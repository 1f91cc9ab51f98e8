"""
Pillow rendering of the hue wheel: a cached ring background plus a cheap
per-frame overlay (swatch, saturation guide, knobs).
"""

from .renderer import Renderer, ring_mask, theta_to_third, rgba

__all__ = ['Renderer', 'ring_mask', 'theta_to_third', 'rgba']
