"""Construction options for :class:`huewheel.HueWheel`.

Options can be given with snake_case names or with their camelCase
spellings (``changeLightness``, ``thicknessHue``, ...).
Unknown keys are ignored, and a value that fails validation falls back to
the field default, so building options never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional, Tuple

from PIL import ImageColor
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .types.color_types import ColorSpace

logger = logging.getLogger(__name__)

_COLOR_FIELDS = (
    "shadow_color",
    "color_spot_border_color",
    "hue_knob_color",
    "lightness_knob_color",
    "hue_knob_color_selected",
    "lightness_knob_color_selected",
)


class WheelOptions(BaseModel):
    """Hue wheel configuration and initial color."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )

    # Size
    diameter: float = Field(default=250.0, gt=0, description="Diameter of the control in pixels")
    shadow_blur: float = Field(default=0.0, ge=0, description="Blur radius of the ring shadow (0 = off)")
    shadow_color: str = Field(default="black", description="CSS color of the shadow")

    # Initial color
    hue: float = Field(default=0.0, description="Initial hue angle in degrees")
    saturation: float = Field(default=1.0, description="Initial saturation [0, 1]")
    lightness: float = Field(
        default=0.5,
        validation_alias=AliasChoices("lightness", "brightness"),
        description="Initial lightness (HSL) or value (HSV) [0, 1]",
    )
    rgb: Optional[Tuple[float, float, float]] = Field(
        default=None,
        description="Initial color as (r, g, b); overrides hue/saturation/lightness",
    )
    color_space: ColorSpace = Field(default=ColorSpace.HSL, description="'hsl' or 'hsv'")

    # Features
    change_saturation: bool = Field(default=True, strict=True, description="Drag the hue knob inwards to change saturation")
    change_lightness: bool = Field(default=True, strict=True, description="Show the lightness ring")
    lightness_ring_clickable: bool = Field(
        default=False, strict=True, description="Clicking anywhere on the lightness ring sets lightness"
    )

    # Color spot
    show_color_spot: bool = Field(default=True, strict=True, description="Show the current color in the center")
    color_spot_width: float = Field(
        default=0.8, ge=0, le=1, description="Color spot radius as a fraction of the hue ring's inner radius"
    )
    color_spot_border: float = Field(default=2.0, ge=0, description="Color spot border width (0 = none)")
    color_spot_border_color: str = Field(default="black", description="CSS color of the color spot border")

    # Rings
    thickness_hue: Optional[float] = Field(default=None, gt=0, description="Hue ring thickness in pixels")
    thickness_lightness: Optional[float] = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("thickness_lightness", "thicknessLightness", "thicknessLuma"),
        description="Lightness ring thickness in pixels",
    )
    quality: int = Field(default=2, ge=1, description="Gradient samples per degree; powers of two step evenly")

    # Knobs
    hue_knob_size: float = Field(default=0.1, gt=0, le=1, description="Hue knob size relative to the diameter")
    hue_knob_color: str = Field(default="white")
    lightness_knob_color: str = Field(default="white")
    hue_knob_color_selected: str = Field(default="#777")
    lightness_knob_color_selected: str = Field(default="#777")
    hue_knob_shadow: bool = Field(default=False, strict=True, description="Hue knob casts the ring shadow")

    # Keyboard
    use_keys: bool = Field(default=True, strict=True, description="Accept keyboard commands")
    hue_key_delta: float = Field(default=1.0, description="Hue step in degrees")
    saturation_key_delta: float = Field(default=1.0, description="Saturation step in percent")
    lightness_key_delta: float = Field(default=1.0, description="Lightness step in percent")
    key_shift_factor: float = Field(
        default=10.0,
        validation_alias=AliasChoices("key_shift_factor", "keyShiftFactor", "shiftKeyFactor"),
        description="Step multiplier while the modifier key is held",
    )
    hue_key_code_up: int = Field(default=33, description="Page up")
    hue_key_code_down: int = Field(default=34, description="Page down")
    saturation_key_code_up: int = Field(default=37, description="Arrow left")
    saturation_key_code_down: int = Field(default=39, description="Arrow right")
    lightness_key_code_up: int = Field(default=38, description="Arrow up")
    lightness_key_code_down: int = Field(default=40, description="Arrow down")

    # Callback
    on_change: Optional[Callable[..., Any]] = Field(default=None, exclude=True)

    @field_validator(*_COLOR_FIELDS)
    @classmethod
    def _check_css_color(cls, value: str) -> str:
        ImageColor.getrgb(value)
        return value

    @field_validator("*", mode="wrap")
    @classmethod
    def _fallback_to_default(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.warning("Ignoring invalid value %r for option %r", value, info.field_name)
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)

    @classmethod
    def parse(cls, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> WheelOptions:
        """Build options from a mapping and/or keyword arguments (keywords win)."""
        merged: dict[str, Any] = {}
        if options is not None:
            if isinstance(options, Mapping):
                merged.update(options)
            else:
                logger.warning("Ignoring options of type %s; expected a mapping", type(options).__name__)
        merged.update(overrides)
        return cls.model_validate(merged)
