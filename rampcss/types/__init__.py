from .color_types import (
    HUE_360,
    OKLCH,
    RAMP_STEPS,
    GamutMode,
    HexColor,
    Ramp,
    RampStep,
    StopSet,
)
from .token_types import (
    THEME_NAMES,
    PaletteColor,
    ThemeMapping,
    ThemeName,
    TokenBundle,
    TokenRef,
)

__all__ = [
    'HUE_360',
    'OKLCH',
    'RAMP_STEPS',
    'GamutMode',
    'HexColor',
    'Ramp',
    'RampStep',
    'StopSet',
    'THEME_NAMES',
    'PaletteColor',
    'ThemeMapping',
    'ThemeName',
    'TokenBundle',
    'TokenRef',
]
