import numpy as np
import pytest

from rampcss import InvalidColorError, is_valid_hex, normalize_hex
from rampcss.errors import ConversionError
from rampcss.hex import hex_to_unit_rgb, np_unit_rgb_to_hex, unit_rgb_to_hex


def test_is_valid_hex():
    assert is_valid_hex("#1c2e7a") is True
    assert is_valid_hex("1c2e7a") is False
    assert is_valid_hex("#abc") is True
    assert is_valid_hex("#zzzzzz") is False


def test_is_valid_hex_edge_cases():
    assert is_valid_hex("  #1C2E7A ") is True
    assert is_valid_hex("#ABC") is True
    assert is_valid_hex("#abcd") is False
    assert is_valid_hex("#1c2e7a80") is False
    assert is_valid_hex("rgb(1, 2, 3)") is False
    assert is_valid_hex("") is False
    assert is_valid_hex(None) is False  # type: ignore[arg-type]


def test_normalize_hex_shorthand():
    assert normalize_hex("#abc") == "#aabbcc"
    assert normalize_hex("#ABC") == "#aabbcc"
    assert normalize_hex(" #1C2E7A ") == "#1c2e7a"


def test_normalize_hex_accepts_missing_hash():
    assert normalize_hex("1c2e7a") == "#1c2e7a"
    assert normalize_hex(" ABC ") == "#aabbcc"
    assert normalize_hex("1c2e7a80") == "#1c2e7a"
    assert is_valid_hex("1c2e7a") is False


def test_normalize_hex_other_representations():
    assert normalize_hex("rgb(28, 46, 122)") == "#1c2e7a"
    assert normalize_hex("white") == "#ffffff"
    assert normalize_hex("#1c2e7aff") == "#1c2e7a"
    assert normalize_hex("hsl(0 100% 50%)") == "#ff0000"


def test_normalize_hex_idempotent():
    for value in ["#abc", "#1C2E7A", "navy", "rgb(10 20 30)", "hsl(200, 50%, 40%)", "#fff8"]:
        once = normalize_hex(value)
        assert normalize_hex(once) == once
        assert is_valid_hex(once)


def test_normalize_hex_rejects_invalid():
    for value in ["#zzzzzz", "1c2e7", "", "blurple", "transparent", 42]:
        with pytest.raises(InvalidColorError):
            normalize_hex(value)  # type: ignore[arg-type]


def test_invalid_color_error_is_value_error():
    with pytest.raises(ValueError):
        normalize_hex("#zzzzzz")


def test_unit_rgb_to_hex_rounds_half_up():
    assert unit_rgb_to_hex(0.5, 0.5, 0.5) == "#808080"
    assert unit_rgb_to_hex(1.0, 0.0, 0.0) == "#ff0000"
    assert unit_rgb_to_hex(1.2, -0.1, 0.0) == "#ff0000"


def test_np_unit_rgb_to_hex():
    rgb = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]])
    assert np_unit_rgb_to_hex(rgb) == ["#000000", "#ffffff"]
    with pytest.raises(ConversionError):
        np_unit_rgb_to_hex(np.array([[np.nan, 0.0, 0.0]]))


def test_hex_to_unit_rgb_round_trip():
    for value in ["#1c2e7a", "#f7f2a1", "#56b6e9", "#f1b400"]:
        assert unit_rgb_to_hex(*hex_to_unit_rgb(value)) == value
