"""
rampcss Color Conversions
=========================

The single color-space round trip the ramp engine needs: gamma-encoded sRGB
to OKLCH and back, plus gamut mapping and CSS color parsing.

Conversion Functions
-------------------

sRGB ↔ linear sRGB:
    srgb_to_linear(c) / linear_to_srgb(c)
        Scalar transfer function
    np_srgb_to_linear(rgb) / np_linear_to_srgb(rgb)
        Vectorized transfer function

sRGB ↔ OKLab ↔ OKLCH:
    unit_rgb_to_oklch(r, g, b) -> OKLCH
    oklch_to_unit_rgb(color) -> (r, g, b), unclamped
    np_unit_rgb_to_oklch(rgb) / np_oklch_to_unit_rgb(lch)
        Vectorized over arrays of shape (..., 3)

Gamut Mapping
-------------
    np_gamut_map_to_srgb(lch, mode="chroma")
        Reduce chroma at constant L/H ("chroma") or clip channels ("clip")
    np_reduce_chroma(lch), np_gamut_clip(lch), np_is_in_gamut(rgb)

Parsing
-------
    parse_color(text) -> (r, g, b)
        Hex (leading "#" optional), rgb()/rgba(), hsl()/hsla() and named colors

Examples
--------
>>> from rampcss.conversions import unit_rgb_to_oklch, np_gamut_map_to_srgb
>>> round(unit_rgb_to_oklch(1.0, 1.0, 1.0).l, 6)
1.0
>>> import numpy as np
>>> rgb = np_gamut_map_to_srgb(np.array([[0.7, 0.4, 150.0]]))  # very saturated green
>>> bool(((rgb >= 0) & (rgb <= 1)).all())
True
"""

from .oklch import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    unit_rgb_to_oklab,
    oklab_to_unit_rgb,
    np_unit_rgb_to_oklab,
    np_oklab_to_unit_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
    unit_rgb_to_oklch,
    oklch_to_unit_rgb,
    np_unit_rgb_to_oklch,
    np_oklch_to_unit_rgb,
)

from .gamut import (
    GAMUT_EPSILON,
    is_in_gamut,
    np_is_in_gamut,
    np_gamut_clip,
    np_reduce_chroma,
    np_gamut_map_to_srgb,
)

from .css_parse import css_hsl_to_rgb, parse_color, parse_hex

from ..types.color_types import GamutMode

__all__ = [
    # Transfer function
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # sRGB ↔ OKLab ↔ OKLCH
    'unit_rgb_to_oklab',
    'oklab_to_unit_rgb',
    'np_unit_rgb_to_oklab',
    'np_oklab_to_unit_rgb',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'np_oklab_to_oklch',
    'np_oklch_to_oklab',
    'unit_rgb_to_oklch',
    'oklch_to_unit_rgb',
    'np_unit_rgb_to_oklch',
    'np_oklch_to_unit_rgb',

    # Gamut
    'GAMUT_EPSILON',
    'GamutMode',
    'is_in_gamut',
    'np_is_in_gamut',
    'np_gamut_clip',
    'np_reduce_chroma',
    'np_gamut_map_to_srgb',

    # Parsing
    'css_hsl_to_rgb',
    'parse_color',
    'parse_hex',
]
