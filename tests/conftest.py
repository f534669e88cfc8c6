import pytest

from rampcss import generate_ramp9
from rampcss.defaults import DEFAULT_MAPPING, DEFAULT_PALETTE
from rampcss.types import PaletteColor, ThemeMapping

TWO_COLORS = (
    PaletteColor("ink", "Ink", "#1c2e7a"),
    PaletteColor("paper", "Paper", "#f7f2a1"),
)


def _two_color_theme() -> ThemeMapping:
    return ThemeMapping(
        surface_primary="paper",
        surface_inverse="ink",
        text_primary="ink",
        text_inverse="paper",
        accent_primary="ink",
        accent_inverse="paper",
    )


@pytest.fixture
def default_palette():
    return list(DEFAULT_PALETTE)


@pytest.fixture
def default_mapping():
    return dict(DEFAULT_MAPPING)


@pytest.fixture
def default_ramps():
    return {color.id: generate_ramp9(color.hex) for color in DEFAULT_PALETTE}


@pytest.fixture
def two_color_palette():
    return list(TWO_COLORS)


@pytest.fixture
def two_color_mapping():
    """Same role assignment for both themes."""
    return {"light": _two_color_theme(), "dark": _two_color_theme()}


@pytest.fixture
def two_color_ramps():
    return {color.id: generate_ramp9(color.hex) for color in TWO_COLORS}
