from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:
    from ..options import WheelOptions


class KeyCommand(str, Enum):
    HUE_INCREASE = "hue_increase"
    HUE_DECREASE = "hue_decrease"
    SATURATION_INCREASE = "saturation_increase"
    SATURATION_DECREASE = "saturation_decrease"
    LIGHTNESS_INCREASE = "lightness_increase"
    LIGHTNESS_DECREASE = "lightness_decrease"

    @property
    def axis(self) -> str:
        """'hue', 'saturation' or 'lightness'."""
        return self.value.rsplit("_", 1)[0]

    @property
    def sign(self) -> int:
        return 1 if self.value.endswith("_increase") else -1


def key_bindings(options: WheelOptions) -> Dict[int, KeyCommand]:
    """
    Map key codes to commands.

    The "up" code of the hue and saturation axes moves the value down
    (page up turns hue backwards, arrow left lowers saturation); lightness
    follows the arrow direction.
    """
    pairs: Tuple[Tuple[int, KeyCommand], ...] = (
        (options.hue_key_code_up, KeyCommand.HUE_DECREASE),
        (options.hue_key_code_down, KeyCommand.HUE_INCREASE),
        (options.saturation_key_code_up, KeyCommand.SATURATION_DECREASE),
        (options.saturation_key_code_down, KeyCommand.SATURATION_INCREASE),
        (options.lightness_key_code_up, KeyCommand.LIGHTNESS_INCREASE),
        (options.lightness_key_code_down, KeyCommand.LIGHTNESS_DECREASE),
    )
    bindings: Dict[int, KeyCommand] = {}
    for code, command in pairs:
        # First binding wins when two axes share a code.
        bindings.setdefault(code, command)
    return bindings
