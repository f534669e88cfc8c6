# No dependencies
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Literal, Tuple

HexColor = str
StopSet = Literal["figma", "even"]
RampStep = int
Ramp = Dict[RampStep, HexColor]

RAMP_STEPS: Tuple[RampStep, ...] = (100, 200, 300, 400, 500, 600, 700, 800, 900)

HUE_360 = 360.0


class GamutMode(str, Enum):
    CHROMA = "chroma"
    CLIP = "clip"


@dataclass(frozen=True, slots=True)
class OKLCH:
    """
    A point in the OKLCH cylinder.

    Attributes:
        l: Perceptual lightness, 0 (black) to 1 (white)
        c: Chroma, 0 upwards (sRGB tops out near 0.37)
        h: Hue angle in degrees [0, 360)
    """
    l: float
    c: float
    h: float

    @property
    def is_achromatic(self) -> bool:
        return self.c == 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.l, self.c, self.h)
