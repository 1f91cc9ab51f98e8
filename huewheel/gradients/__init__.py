"""
Gradient lookup tables for rendering the hue and lightness rings.

The ramps are sampled once per quality setting so the rings can be painted
by table lookup instead of per-pixel color conversion.
"""

from .gradient_table import GradientTable, sample_ramp, HUE_STOPS, LIGHTNESS_STOPS

__all__ = [
    "GradientTable",
    "sample_ramp",
    "HUE_STOPS",
    "LIGHTNESS_STOPS",
]
