from __future__ import annotations
from typing import Optional, Tuple

from ..conversions import clamp01, convert, from_rgb, to_rgb, validate_rgb, wrap_hue
from ..types.color_types import ColorSpace, ColorTriple, RGBTuple, Scalar


class ColorState:
    """
    The single source of truth for the control's current color.

    ``hue`` is stored in degrees and kept in ``[0, 360)``; ``saturation`` and
    ``third`` (lightness in HSL mode, value in HSV mode) are kept in ``[0, 1]``.
    ``rgb`` is derived: it is recomputed from ``(hue, saturation, third, space)``
    after every mutation and is never written directly.
    """
    __slots__ = ('hue', 'saturation', 'third', 'space', '_rgb')

    def __init__(
        self,
        hue: Scalar = 0.0,
        saturation: Scalar = 1.0,
        third: Scalar = 0.5,
        space: ColorSpace = ColorSpace.HSL,
    ) -> None:
        self.hue = float(hue)
        self.saturation = float(saturation)
        self.third = float(third)
        self.space = ColorSpace(space)
        self._rgb: RGBTuple = (0, 0, 0)
        self.validate()

    @classmethod
    def from_rgb(cls, rgb: Tuple[Scalar, Scalar, Scalar], space: ColorSpace = ColorSpace.HSL) -> ColorState:
        state = cls(space=space)
        state.set_rgb(*rgb)
        return state

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def rgb(self) -> RGBTuple:
        return self._rgb

    @property
    def triple(self) -> ColorTriple:
        return self.hue, self.saturation, self.third

    # ------------------ MUTATION ------------------
    def validate(self) -> None:
        """Wrap hue, clamp saturation/third and re-derive ``rgb``."""
        self.hue = wrap_hue(self.hue)
        self.saturation = clamp01(self.saturation)
        self.third = clamp01(self.third)
        self._rgb = to_rgb(self.triple, self.space)

    def set(
        self,
        hue: Optional[Scalar] = None,
        saturation: Optional[Scalar] = None,
        third: Optional[Scalar] = None,
    ) -> None:
        """Replace any subset of the three channels, then validate."""
        if hue is not None:
            self.hue = float(hue)
        if saturation is not None:
            self.saturation = float(saturation)
        if third is not None:
            self.third = float(third)
        self.validate()

    def nudge(self, hue: Scalar = 0.0, saturation: Scalar = 0.0, third: Scalar = 0.0) -> None:
        """Add deltas to the channels; hue wraps, the others clamp."""
        self.set(self.hue + hue, self.saturation + saturation, self.third + third)

    def set_rgb(self, r: Scalar, g: Scalar, b: Scalar) -> None:
        """Round and clamp ``(r, g, b)`` to 8-bit and store it expressed in the active space."""
        self.set(*from_rgb(validate_rgb(r, g, b), self.space))

    def expressed_in(self, space: ColorSpace) -> ColorTriple:
        """Current color as a triple in ``space`` (through RGB when it differs)."""
        return convert(self.triple, self.space, ColorSpace(space))

    def to_space(self, space: ColorSpace) -> bool:
        """
        Switch the active space, re-expressing the color through an RGB round trip.

        Returns:
            True if the space changed, False if it already was ``space``.
        """
        space = ColorSpace(space)
        if space == self.space:
            return False
        h, s, t = self.expressed_in(space)
        self.space = space
        self.set(h, s, t)
        return True

    def __repr__(self) -> str:
        return (
            f"ColorState({self.space.value}: h={self.hue:.2f}, s={self.saturation:.3f}, "
            f"t={self.third:.3f}, rgb={self._rgb})"
        )
