"""
sRGB <-> OKLab <-> OKLCH conversions.

Matrices follow Björn Ottosson's OKLab definition with the higher-precision
sRGB-derived coefficients used by CSS Color 4 implementations, so results
agree with browsers to well under one 8-bit step.
"""
from __future__ import annotations
import math
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HUE_360, OKLCH

# linear sRGB -> LMS
_LRGB_TO_LMS = np.array([
    [0.41222147079999993, 0.5363325363, 0.0514459929],
    [0.2119034981999999, 0.6806995450999999, 0.1073969566],
    [0.08830246189999998, 0.2817188376, 0.6299787005000002],
])

# cube-rooted LMS -> OKLab
_LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.793617785, -0.0040720468],
    [1.9779984951, -2.428592205, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.808675766],
])

# OKLab -> cube-rooted LMS
_OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377773761749, 0.2158037573099136],
    [1.0, -0.1055613458156586, -0.0638541728258133],
    [1.0, -0.0894841775298119, -1.2914855480194092],
])

# LMS -> linear sRGB
_LMS_TO_LRGB = np.array([
    [4.0767416360759583, -3.3077115392580629, 0.2309699031821043],
    [-1.2684379732850315, 2.6097573492876882, -0.3413193760025467],
    [-0.0041960761386756, -0.7034186179359362, 1.7076146940746117],
])


## Transfer function

def srgb_to_linear(c: float) -> float:
    """Decode one gamma-encoded sRGB channel in [0, 1] to linear light."""
    a = abs(c)
    if a <= 0.04045:
        return c / 12.92
    return math.copysign(((a + 0.055) / 1.055) ** 2.4, c)


def linear_to_srgb(c: float) -> float:
    """Encode one linear-light channel back to gamma-encoded sRGB."""
    a = abs(c)
    if a > 0.0031308:
        return math.copysign(1.055 * a ** (1 / 2.4) - 0.055, c)
    return c * 12.92


def np_srgb_to_linear(rgb: NDArray) -> NDArray:
    """Vectorized: decode gamma-encoded sRGB to linear light."""
    rgb = np.asarray(rgb, dtype=float)
    a = np.abs(rgb)
    return np.where(a <= 0.04045, rgb / 12.92, np.sign(rgb) * ((a + 0.055) / 1.055) ** 2.4)


def np_linear_to_srgb(rgb: NDArray) -> NDArray:
    """Vectorized: encode linear light to gamma-encoded sRGB."""
    rgb = np.asarray(rgb, dtype=float)
    a = np.abs(rgb)
    return np.where(a > 0.0031308, np.sign(rgb) * (1.055 * a ** (1 / 2.4) - 0.055), rgb * 12.92)


## sRGB <-> OKLab

def np_unit_rgb_to_oklab(rgb: NDArray) -> NDArray:
    """
    Vectorized: convert gamma-encoded sRGB to OKLab.

    Args:
        rgb: array of shape (..., 3), channels in [0, 1]

    Returns:
        lab: array of shape (..., 3): (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=float)
    lms = np_srgb_to_linear(rgb) @ _LRGB_TO_LMS.T
    lab = np.cbrt(lms) @ _LMS_TO_OKLAB.T
    # r == g == b has no opponent component
    grey = (rgb[..., 0] == rgb[..., 1]) & (rgb[..., 1] == rgb[..., 2])
    lab[..., 1:] = np.where(grey[..., None], 0.0, lab[..., 1:])
    return lab


def np_oklab_to_unit_rgb(lab: NDArray) -> NDArray:
    """
    Vectorized: convert OKLab to gamma-encoded sRGB.

    Channels are NOT clamped; out-of-gamut input yields values outside [0, 1].

    Args:
        lab: array of shape (..., 3): (L, a, b)

    Returns:
        rgb: array of shape (..., 3)
    """
    lab = np.asarray(lab, dtype=float)
    lms = (lab @ _OKLAB_TO_LMS.T) ** 3
    return np_linear_to_srgb(lms @ _LMS_TO_LRGB.T)


def unit_rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    L, a, b_ = np_unit_rgb_to_oklab(np.array([r, g, b], dtype=float))
    return float(L), float(a), float(b_)


def oklab_to_unit_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    r, g, b_ = np_oklab_to_unit_rgb(np.array([L, a, b], dtype=float))
    return float(r), float(g), float(b_)


## OKLab <-> OKLCH

def oklab_to_oklch(L: float, a: float, b: float) -> OKLCH:
    """Convert OKLab to OKLCH; a color without chroma gets hue 0."""
    c = math.hypot(a, b)
    if c == 0.0:
        return OKLCH(L, c, 0.0)
    h = math.degrees(math.atan2(b, a)) % HUE_360
    return OKLCH(L, c, h)


def oklch_to_oklab(color: OKLCH) -> Tuple[float, float, float]:
    rad = math.radians(color.h)
    return color.l, color.c * math.cos(rad), color.c * math.sin(rad)


def np_oklab_to_oklch(lab: NDArray) -> NDArray:
    """Vectorized: (..., 3) OKLab -> (..., 3) OKLCH with hue in [0, 360)."""
    lab = np.asarray(lab, dtype=float)
    c = np.hypot(lab[..., 1], lab[..., 2])
    h = np.degrees(np.arctan2(lab[..., 2], lab[..., 1])) % HUE_360
    h = np.where(c == 0.0, 0.0, h)
    return np.stack([lab[..., 0], c, h], axis=-1)


def np_oklch_to_oklab(lch: NDArray) -> NDArray:
    """Vectorized: (..., 3) OKLCH -> (..., 3) OKLab."""
    lch = np.asarray(lch, dtype=float)
    rad = np.radians(lch[..., 2])
    return np.stack(
        [lch[..., 0], lch[..., 1] * np.cos(rad), lch[..., 1] * np.sin(rad)], axis=-1
    )


## sRGB <-> OKLCH

def unit_rgb_to_oklch(r: float, g: float, b: float) -> OKLCH:
    """
    Convert a gamma-encoded sRGB color to OKLCH.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        OKLCH: the perceptual point
    """
    return oklab_to_oklch(*unit_rgb_to_oklab(r, g, b))


def oklch_to_unit_rgb(color: OKLCH) -> Tuple[float, float, float]:
    """Convert OKLCH to unclamped gamma-encoded sRGB."""
    return oklab_to_unit_rgb(*oklch_to_oklab(color))


def np_unit_rgb_to_oklch(rgb: NDArray) -> NDArray:
    return np_oklab_to_oklch(np_unit_rgb_to_oklab(rgb))


def np_oklch_to_unit_rgb(lch: NDArray) -> NDArray:
    return np_oklab_to_unit_rgb(np_oklch_to_oklab(lch))
