"""
Hue interpolation along the shortest arc.
"""
from ..types.color_types import HUE_360


def wrap_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    x = h % HUE_360
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if x >= HUE_360 else x


def shortest_hue_delta(h0: float, h1: float) -> float:
    """
    Signed angle from ``h0`` to ``h1`` along the shorter arc.

    Returns:
        Delta in (-180, 180]; an exact half turn is taken as +180.
    """
    d = (h1 - h0) % HUE_360
    if d > 180:
        d -= HUE_360
    return d


def hue_lerp(h0: float, h1: float, u: float) -> float:
    """
    Interpolate from ``h0`` to ``h1`` by fraction ``u`` along the shortest path.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        u: Interpolation coefficient, usually in [0, 1]

    Returns:
        Interpolated hue in [0, 360)
    """
    a = wrap_hue(h0)
    return wrap_hue(a + shortest_hue_delta(a, wrap_hue(h1)) * u)
