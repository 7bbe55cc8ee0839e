import pytest

from sphjet.colorbar import get_rgb

VALUES = [i / 20 for i in range(21)]


@pytest.mark.parametrize("val", VALUES)
def test_greyscale_map(val):
    assert get_rgb(val, 5) == pytest.approx((val, val, val))


@pytest.mark.parametrize("val", VALUES)
def test_inverse_greyscale_matches_inverted_greyscale(val):
    assert get_rgb(val, 6) == pytest.approx(get_rgb(val, 5, invert=True))


@pytest.mark.parametrize("cmap", range(8))
@pytest.mark.parametrize("val", [0.03, 0.27, 0.5, 0.71, 0.96])
def test_invert_flips_value(cmap, val):
    assert get_rgb(val, cmap, invert=True) == pytest.approx(get_rgb(1.0 - val, cmap))


@pytest.mark.parametrize("val", VALUES)
def test_original_map_red_blue_mirror(val):
    r, _g, _b = get_rgb(val, 0)
    _r2, _g2, b2 = get_rgb(1.0 - val, 0)
    assert r == pytest.approx(b2)


@pytest.mark.parametrize("cmap", [8, 42, -1])
def test_unknown_map_is_white(cmap):
    assert get_rgb(0.3, cmap) == (1.0, 1.0, 1.0)


def test_contour_map_black_on_levels_white_between():
    assert get_rgb(0.5, 7) == (0.0, 0.0, 0.0)
    assert get_rgb(0.5 + 1 / 32, 7) == (1.0, 1.0, 1.0)


def test_electric_middle_is_grey():
    r, g, b = get_rgb(0.5, 4)
    assert r == pytest.approx(b)
    assert g == pytest.approx(r)


@pytest.mark.parametrize("val", [0.4, 0.45, 0.55, 0.6])
def test_electric_green_is_larger_of_red_and_blue(val):
    r, g, b = get_rgb(val, 4)
    assert g == pytest.approx(max(r, b))


@pytest.mark.parametrize("val", [0.0, 0.2, 0.4])
def test_copper_channels_ordered(val):
    r, g, b = get_rgb(val, 2)
    assert r >= g >= b