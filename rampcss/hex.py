"""Hex color validation, normalization and serialization."""
from __future__ import annotations
import re
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from .conversions.css_parse import parse_color
from .errors import ConversionError, InvalidColorError
from .types.color_types import HexColor

_SHORT_HEX = re.compile(r"^#[0-9a-f]{3}$")
_LONG_HEX = re.compile(r"^#[0-9a-f]{6}$")
_VALID_HEX = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_valid_hex(value: str) -> bool:
    """True iff the trimmed value is a #rgb or #rrggbb color. Never raises."""
    if not isinstance(value, str):
        return False
    return bool(_VALID_HEX.match(value.strip()))


def normalize_hex(value: str) -> HexColor:
    """
    Canonicalize a color to lowercase ``#rrggbb``.

    Shorthand ``#abc`` expands to ``#aabbcc``. Any other parseable CSS color
    (``rgb(...)``, ``hsl(...)``, named colors, hex with alpha) is converted to
    hex first.

    Raises:
        InvalidColorError: if ``value`` cannot be parsed as a color
    """
    if not isinstance(value, str):
        raise InvalidColorError(value, "Invalid hex")
    h = value.strip().lower()
    if _SHORT_HEX.match(h):
        return "#" + h[1] * 2 + h[2] * 2 + h[3] * 2
    if _LONG_HEX.match(h):
        return h
    r, g, b = parse_color(h)
    return normalize_hex(unit_rgb_to_hex(r, g, b))


def np_unit_rgb_to_int(rgb: NDArray) -> NDArray:
    """Vectorized: quantize unit sRGB to 0..255, rounding halves up."""
    rgb = np.asarray(rgb, dtype=float)
    if not np.all(np.isfinite(rgb)):
        raise ConversionError("Cannot serialize non-finite sRGB values")
    return np.floor(np.clip(rgb, 0.0, 1.0) * 255 + 0.5).astype(int)


def unit_rgb_to_hex(r: float, g: float, b: float) -> HexColor:
    ri, gi, bi = (int(v) for v in np_unit_rgb_to_int(np.array([r, g, b])))
    return f"#{ri:02x}{gi:02x}{bi:02x}"


def np_unit_rgb_to_hex(rgb: NDArray) -> list[HexColor]:
    """Serialize an (n, 3) array of unit sRGB colors to hex strings."""
    ints = np_unit_rgb_to_int(rgb).reshape(-1, 3)
    return [f"#{int(r):02x}{int(g):02x}{int(b):02x}" for r, g, b in ints]


def hex_to_unit_rgb(value: str) -> Tuple[float, float, float]:
    """Parse a color (normalized first) into unit sRGB."""
    h = normalize_hex(value)
    return tuple(int(h[i:i + 2], 16) / 255 for i in (1, 3, 5))  # type: ignore[return-value]
