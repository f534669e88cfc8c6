"""
Nine-step ramp generation.

A base color is placed at the middle of a conceptual white -> base -> black
gradient in OKLCH. The 25% and 75% samples of that gradient become the ends of
a refined light -> base -> dark gradient, which is then sampled at nine fixed
positions to produce steps 100..900. Step 500 is always the base color itself.
"""
from __future__ import annotations
from typing import Dict, Sequence, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from .conversions.gamut import np_gamut_map_to_srgb
from .conversions.oklch import unit_rgb_to_oklch
from .hex import hex_to_unit_rgb, normalize_hex, np_unit_rgb_to_hex
from .types.color_types import OKLCH, RAMP_STEPS, GamutMode, HexColor, Ramp, RampStep, StopSet
from .utils.interpolate_hue import hue_lerp

# Positions on the refined gradient for steps 100..900.
STOP_SETS: Dict[StopSet, Tuple[float, ...]] = {
    "figma": (0.0, 0.13, 0.25, 0.38, 0.5, 0.63, 0.75, 0.88, 1.0),
    "even": (0.0, 0.125, 0.25, 0.375, 0.5, 0.625, 0.75, 0.875, 1.0),
}

LIGHT_ENDPOINT_POSITION = 0.25
DARK_ENDPOINT_POSITION = 0.75

WHITE = unit_rgb_to_oklch(1.0, 1.0, 1.0)
BLACK = unit_rgb_to_oklch(0.0, 0.0, 0.0)


def stop_positions(stop_set: StopSet) -> Tuple[float, ...]:
    try:
        return STOP_SETS[stop_set]
    except KeyError:
        raise ValueError(
            f"Unknown stop set {stop_set!r}; expected one of {sorted(STOP_SETS)}"
        ) from None


def lerp_oklch(a: OKLCH, b: OKLCH, t: float) -> OKLCH:
    """
    Interpolate two OKLCH points.

    Lightness and chroma are linear; hue takes the shortest arc. A point
    without chroma (white, black, greys) enters the hue blend at 0 degrees.
    """
    return OKLCH(
        a.l + (b.l - a.l) * t,
        a.c + (b.c - a.c) * t,
        hue_lerp(a.h, b.h, t),
    )


def sample_three_point(start: OKLCH, mid: OKLCH, end: OKLCH, t: float) -> OKLCH:
    """Sample a start(0) -> mid(0.5) -> end(1) gradient at position ``t``."""
    if t <= 0.5:
        return lerp_oklch(start, mid, t / 0.5)
    return lerp_oklch(mid, end, (t - 0.5) / 0.5)


def ramp_endpoints(base: OKLCH) -> Tuple[OKLCH, OKLCH]:
    """Light and dark ends of the refined gradient for ``base``."""
    light = sample_three_point(WHITE, base, BLACK, LIGHT_ENDPOINT_POSITION)
    dark = sample_three_point(WHITE, base, BLACK, DARK_ENDPOINT_POSITION)
    return light, dark


def base_oklch(base_hex: str) -> OKLCH:
    """Parse and convert a base color; raises InvalidColorError."""
    return unit_rgb_to_oklch(*hex_to_unit_rgb(base_hex))


def ramp_samples(base_hex: str, stop_set: StopSet = "figma") -> Dict[RampStep, OKLCH]:
    """The nine unclamped OKLCH samples behind a ramp, keyed by step."""
    positions = stop_positions(stop_set)
    base = base_oklch(base_hex)
    light, dark = ramp_endpoints(base)
    return {
        step: sample_three_point(light, base, dark, t)
        for step, t in zip(RAMP_STEPS, positions)
    }


def np_samples_to_hex(samples: Sequence[OKLCH], gamut: Union[GamutMode, str] = GamutMode.CHROMA) -> list[HexColor]:
    """Gamut-map a batch of OKLCH points and serialize them as hex."""
    lch: NDArray = np.array([s.as_tuple() for s in samples], dtype=float)
    return np_unit_rgb_to_hex(np_gamut_map_to_srgb(lch, gamut))


def generate_ramp9(
    base_hex: str,
    stop_set: StopSet = "figma",
    gamut: Union[GamutMode, str] = GamutMode.CHROMA,
) -> Ramp:
    """
    Generate the nine-step ramp for a base color.

    Args:
        base_hex: Base color; any form accepted by ``normalize_hex``
        stop_set: "figma" (0, .13, .25, .38, .5, .63, .75, .88, 1) or
            "even" (multiples of .125)
        gamut: Gamut mapping strategy, "chroma" or "clip"

    Returns:
        Ramp: dict mapping 100..900 to lowercase #rrggbb; step 500 is the
        normalized base color.

    Raises:
        InvalidColorError: if ``base_hex`` is not a color
        ConversionError: if a sample cannot be mapped into sRGB
        ValueError: if ``stop_set`` is unknown
    """
    normalized = normalize_hex(base_hex)
    samples = ramp_samples(normalized, stop_set)
    hexes = np_samples_to_hex(list(samples.values()), gamut)
    ramp: Ramp = dict(zip(samples.keys(), hexes))
    ramp[500] = normalized
    return ramp


# Alias matching the external contract name.
generate_ramp = generate_ramp9
