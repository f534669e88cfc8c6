"""
Parsing of CSS color strings into unit sRGB triples.

Recognised forms: hex (#rgb, #rgba, #rrggbb, #rrggbbaa), rgb()/rgba(),
hsl()/hsla() and the CSS named colors (resolved through webcolors). The
leading "#" of a hex color is optional. Alpha is parsed and discarded.
"""
from __future__ import annotations
import math
import re
from typing import List, Tuple

import webcolors

from ..errors import InvalidColorError

_HEX_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_FUNC_RE = re.compile(r"^(rgba?|hsla?)\(\s*(.*?)\s*\)$")
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)(e[+-]?\d+)?$")
_ANGLE_UNITS = {"deg": 1.0, "grad": 0.9, "rad": 180.0 / math.pi, "turn": 360.0}


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360


def css_hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to RGB using the CSS Color 4 algorithm.

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = m1, m2, 2 * l - m1
    elif hue_section == 1:
        r, g, b = m2, m1, 2 * l - m1
    elif hue_section == 2:
        r, g, b = 2 * l - m1, m1, m2
    elif hue_section == 3:
        r, g, b = 2 * l - m1, m2, m1
    elif hue_section == 4:
        r, g, b = m2, 2 * l - m1, m1
    else:
        r, g, b = m1, 2 * l - m1, m2

    return r, g, b


def _clamp01(v: float) -> float:
    return min(1.0, max(0.0, v))


def _number(token: str, original: str) -> float:
    if not _NUMBER_RE.match(token):
        raise InvalidColorError(original, "Unrecognised color")
    return float(token)


def _percent_or_number(token: str, scale: float, original: str) -> float:
    """Percentages map to [0, 1]; bare numbers are divided by ``scale``."""
    if token == "none":
        return 0.0
    if token.endswith("%"):
        return _number(token[:-1], original) / 100.0
    return _number(token, original) / scale


def _angle(token: str, original: str) -> float:
    if token == "none":
        return 0.0
    for unit, factor in _ANGLE_UNITS.items():
        if token.endswith(unit):
            return _number(token[: -len(unit)], original) * factor
    return _number(token, original)


def _split_args(body: str, original: str) -> List[str]:
    if "," in body:
        parts = [p.strip() for p in body.split(",")]
        if any(not p for p in parts):
            raise InvalidColorError(original, "Unrecognised color")
        if len(parts) == 4:
            parts = parts[:3] + ["/", parts[3]]
    else:
        parts = body.replace("/", " / ").split()
    if len(parts) == 3:
        return parts
    if len(parts) == 5 and parts[3] == "/":
        _percent_or_number(parts[4], 1.0, original)
        return parts[:3]
    raise InvalidColorError(original, "Unrecognised color")


def _named_color(name: str, original: str) -> str:
    try:
        return webcolors.name_to_hex(name)
    except ValueError:
        raise InvalidColorError(original, "Unrecognised color") from None


def parse_hex(value: str) -> Tuple[float, float, float]:
    """Parse [#]rgb, [#]rgba, [#]rrggbb or [#]rrggbbaa into unit sRGB, dropping alpha."""
    h = value.strip().lower()
    match = _HEX_RE.match(h)
    if not match:
        raise InvalidColorError(value)
    digits = match.group(1)
    if len(digits) <= 4:
        digits = "".join(d * 2 for d in digits)
    return tuple(int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))  # type: ignore[return-value]


def parse_color(value: str) -> Tuple[float, float, float]:
    """
    Parse any supported CSS color string.

    Args:
        value: CSS color text, e.g. "#1c2e7a", "rgb(28 46 122)", "hsl(228 63% 29%)", "navy"

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]

    Raises:
        InvalidColorError: if ``value`` is not a recognised color
    """
    if not isinstance(value, str):
        raise InvalidColorError(value, "Color must be a string")
    text = value.strip().lower()

    if text.startswith("#") or _HEX_RE.match(text):
        return parse_hex(text)

    match = _FUNC_RE.match(text)
    if not match:
        return parse_hex(_named_color(text, value))

    func, body = match.groups()
    a, b, c = _split_args(body, value)
    if func.startswith("rgb"):
        return (
            _clamp01(_percent_or_number(a, 255.0, value)),
            _clamp01(_percent_or_number(b, 255.0, value)),
            _clamp01(_percent_or_number(c, 255.0, value)),
        )

    # hsl saturation/lightness: bare numbers are read as percentages
    h = _angle(a, value)
    s = _clamp01(_percent_or_number(b, 100.0, value))
    l = _clamp01(_percent_or_number(c, 100.0, value))
    r, g, b_ = css_hsl_to_rgb(h, s, l)
    return _clamp01(r), _clamp01(g), _clamp01(b_)
