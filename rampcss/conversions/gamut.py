"""
Gamut mapping from OKLCH into the sRGB cube.

Two strategies are provided:

- ``GamutMode.CHROMA``: keep lightness and hue, bisect chroma down until the
  color fits, then clip whatever float error remains.
- ``GamutMode.CLIP``: convert and clip each sRGB channel to [0, 1].

Lightness is clamped to [0, 1] before either strategy runs.
"""
from __future__ import annotations
from typing import Union

import numpy as np
from numpy import ndarray as NDArray

from ..errors import ConversionError
from ..types.color_types import GamutMode
from .oklch import np_oklch_to_unit_rgb

GAMUT_EPSILON = 1e-6
CHROMA_ITERATIONS = 28


def np_is_in_gamut(rgb: NDArray, eps: float = GAMUT_EPSILON) -> NDArray:
    """True where every channel of (..., 3) ``rgb`` lies within [0, 1]."""
    rgb = np.asarray(rgb, dtype=float)
    return np.all((rgb >= -eps) & (rgb <= 1.0 + eps), axis=-1)


def is_in_gamut(l: float, c: float, h: float) -> bool:
    return bool(np_is_in_gamut(np_oklch_to_unit_rgb(np.array([l, c, h], dtype=float))))


def _prepare(lch: NDArray) -> NDArray:
    lch = np.array(lch, dtype=float)
    if lch.shape[-1] != 3:
        raise ValueError(f"Expected OKLCH values with last dimension 3, got shape {lch.shape}")
    if not np.all(np.isfinite(lch)):
        raise ConversionError("Cannot map non-finite OKLCH values into gamut")
    lch[..., 0] = np.clip(lch[..., 0], 0.0, 1.0)
    lch[..., 1] = np.maximum(lch[..., 1], 0.0)
    return lch


def np_gamut_clip(lch: NDArray) -> NDArray:
    """
    Vectorized: map OKLCH into sRGB by clipping channels.

    Args:
        lch: array of shape (..., 3)

    Returns:
        rgb: array of shape (..., 3), channels in [0, 1]
    """
    rgb = np_oklch_to_unit_rgb(_prepare(lch))
    return np.clip(rgb, 0.0, 1.0)


def np_reduce_chroma(lch: NDArray, iterations: int = CHROMA_ITERATIONS) -> NDArray:
    """
    Vectorized: lower chroma at constant lightness and hue until in gamut.

    In-gamut points are returned unchanged (apart from lightness clamping).

    Args:
        lch: array of shape (..., 3)
        iterations: Bisection steps; 28 resolves chroma to ~1e-9

    Returns:
        lch: array of shape (..., 3) whose points all fit sRGB
    """
    lch = _prepare(lch)
    inside = np_is_in_gamut(np_oklch_to_unit_rgb(lch))
    if np.all(inside):
        return lch

    lo = np.zeros(lch.shape[:-1])
    hi = lch[..., 1].copy()
    trial = lch.copy()
    for _ in range(iterations):
        mid = (lo + hi) / 2
        trial[..., 1] = mid
        ok = np_is_in_gamut(np_oklch_to_unit_rgb(trial))
        lo = np.where(ok, mid, lo)
        hi = np.where(ok, hi, mid)

    out = lch.copy()
    out[..., 1] = np.where(inside, lch[..., 1], lo)
    return out


def np_gamut_map_to_srgb(lch: NDArray, mode: Union[GamutMode, str] = GamutMode.CHROMA) -> NDArray:
    """
    Map OKLCH points to displayable sRGB.

    Args:
        lch: array of shape (..., 3)
        mode: "chroma" or "clip"

    Returns:
        rgb: array of shape (..., 3), channels in [0, 1]

    Raises:
        ConversionError: if the input or result is not finite
    """
    mode = GamutMode(mode)
    if mode is GamutMode.CHROMA:
        rgb = np.clip(np_oklch_to_unit_rgb(np_reduce_chroma(lch)), 0.0, 1.0)
    else:
        rgb = np_gamut_clip(lch)
    if not np.all(np.isfinite(rgb)):
        raise ConversionError("Gamut mapping produced non-finite sRGB values")
    return rgb
