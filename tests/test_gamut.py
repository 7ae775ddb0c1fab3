import pytest

from chromatag.core import config as c
from chromatag.core.conversions import oklch_to_linear_srgb
from chromatag.core.gamut import in_gamut, map_to_gamut


@pytest.mark.parametrize(
    'rgb, expected',
    [
        ((0.0, 0.5, 1.0), True),
        ((-0.0009, 1.0009, 0.5), True),
        ((-0.002, 0.5, 0.5), False),
        ((0.5, 1.002, 0.5), False),
    ],
)
def test_in_gamut_tolerance(rgb, expected):
    assert in_gamut(rgb) is expected


def test_in_gamut_color_is_untouched():
    L, chroma, lin = map_to_gamut(0.5, 0.0, 40.0)
    assert (L, chroma) == (0.5, 0.0)
    assert lin == oklch_to_linear_srgb(0.5, 0.0, 40.0)


def test_out_of_gamut_color_loses_chroma_only():
    L, chroma, lin = map_to_gamut(0.6, 0.4, 150.0)
    assert L == 0.6
    assert chroma < 0.4
    assert chroma >= 0.4 * c.GAMUT_CHROMA_FACTOR ** c.GAMUT_MAX_ITERATIONS - 1e-12
    assert lin == oklch_to_linear_srgb(0.6, chroma, 150.0)


def test_mapping_stops_at_first_fitting_chroma():
    _, chroma, lin = map_to_gamut(0.6, 0.4, 150.0)
    assert in_gamut(lin)
    assert not in_gamut(oklch_to_linear_srgb(0.6, chroma / c.GAMUT_CHROMA_FACTOR, 150.0))


def test_iteration_cap_accepts_last_value():
    L, chroma, lin = map_to_gamut(0.6, 5.0, 150.0)
    assert chroma == pytest.approx(5.0 * c.GAMUT_CHROMA_FACTOR ** c.GAMUT_MAX_ITERATIONS)
    assert not in_gamut(lin)


def test_tighter_variant():
    _, chroma, _ = map_to_gamut(0.6, 5.0, 150.0, c.REMAP_CHROMA_FACTOR, c.REMAP_MAX_ITERATIONS)
    assert chroma == pytest.approx(5.0 * 0.95 ** 8)
