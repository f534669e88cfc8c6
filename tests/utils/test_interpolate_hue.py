import pytest

from rampcss.utils import hue_lerp, shortest_hue_delta, wrap_hue


def test_wrap_hue():
    assert wrap_hue(0) == 0
    assert wrap_hue(360) == 0
    assert wrap_hue(370) == 10
    assert wrap_hue(-10) == 350
    assert wrap_hue(-720) == 0
    assert 0 <= wrap_hue(-1e-17) < 360


def test_shortest_hue_delta():
    assert shortest_hue_delta(10, 20) == 10
    assert shortest_hue_delta(20, 10) == -10
    assert shortest_hue_delta(350, 10) == 20
    assert shortest_hue_delta(10, 350) == -20
    assert shortest_hue_delta(0, 359) == -1
    assert shortest_hue_delta(0, 268) == -92


def test_shortest_hue_delta_half_turn_is_positive():
    assert shortest_hue_delta(10, 190) == 180
    assert shortest_hue_delta(190, 10) == 180


def test_shortest_hue_delta_range():
    for h0 in range(0, 360, 15):
        for h1 in range(0, 360, 15):
            d = shortest_hue_delta(h0, h1)
            assert -180 < d <= 180
            assert wrap_hue(h0 + d) == pytest.approx(wrap_hue(h1))


def test_hue_lerp_crosses_zero():
    assert hue_lerp(350, 10, 0.5) == 0
    assert hue_lerp(350, 10, 0.25) == pytest.approx(355)
    assert hue_lerp(10, 350, 0.25) == pytest.approx(5)


def test_hue_lerp_from_zero_goes_the_short_way():
    # a hueless white (h = 0) toward a blue at 268 passes through magenta
    assert hue_lerp(0, 268, 0.5) == pytest.approx(314)


def test_hue_lerp_endpoints():
    assert hue_lerp(30, 300, 0) == pytest.approx(30)
    assert hue_lerp(30, 300, 1) == pytest.approx(300)
