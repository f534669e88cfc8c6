from typing import Dict, Tuple

from .types.color_types import GamutMode, StopSet
from .types.token_types import PaletteColor, ThemeMapping

DEFAULT_STOP_SET: StopSet = "figma"
DEFAULT_GAMUT_MODE = GamutMode.CHROMA

NEW_COLOR_ID = "new-color"
NEW_COLOR_LABEL = "New Color"
NEW_COLOR_HEX = "#888888"

DEFAULT_PALETTE: Tuple[PaletteColor, ...] = (
    PaletteColor("deep-blue", "Deep Blue", "#1c2e7a"),
    PaletteColor("light-yellow", "Light Yellow", "#f7f2a1"),
    PaletteColor("light-blue", "Light Blue", "#56b6e9"),
    PaletteColor("deep-yellow", "Deep Yellow", "#f1b400"),
)

DEFAULT_MAPPING: Dict[str, ThemeMapping] = {
    "light": ThemeMapping(
        surface_primary="light-yellow",
        surface_inverse="deep-blue",
        text_primary="deep-blue",
        text_inverse="light-yellow",
        accent_primary="light-blue",
        accent_inverse="deep-yellow",
    ),
    "dark": ThemeMapping(
        surface_primary="deep-blue",
        surface_inverse="light-yellow",
        text_primary="light-yellow",
        text_inverse="deep-blue",
        accent_primary="deep-yellow",
        accent_inverse="light-blue",
    ),
}
