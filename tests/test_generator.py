import pytest

from chromatag import (
    InterfaceStyle,
    color,
    color_pair,
    derive_color,
    hash_token,
    prefers_white_text,
)
from chromatag.core import config as c
from chromatag.core.contrast import contrast_ratio_srgb
from chromatag.core.generator import generate

WHITE = (1.0, 1.0, 1.0)
BLACK = (0.0, 0.0, 0.0)


def _in_unit_range(rgb):
    return all(0.0 <= v <= 1.0 for v in rgb)


def _text_contrast(out):
    return contrast_ratio_srgb(out.rgb, WHITE if out.prefer_white_text else BLACK)


@pytest.mark.parametrize('dark_mode', [False, True])
def test_same_input_same_color(dark_mode):
    assert derive_color("TestString", dark_mode) == derive_color("TestString", dark_mode)


def test_modes_do_not_interfere():
    first_dark = derive_color("TestString", True)
    derive_color("TestString", False)
    assert derive_color("TestString", True) == first_dark


def test_different_strings_different_colors():
    assert derive_color("StringOne").rgb != derive_color("StringTwo").rgb


def test_many_strings_spread_out():
    colors = {derive_color(f"string{i}").rgb for i in range(100)}
    assert len(colors) > 80


def test_dark_mode_changes_some_colors():
    strings = [f"test{i}" for i in range(1, 21)]
    differing = [s for s in strings if color(s, InterfaceStyle.LIGHT) != color(s, InterfaceStyle.DARK)]
    assert differing


@pytest.mark.parametrize('dark_mode', [False, True])
def test_contrast_check_reaches_aa(dark_mode):
    out = derive_color("ContrastCheck", dark_mode)
    assert _text_contrast(out) >= 4.5


@pytest.mark.parametrize('dark_mode', [False, True])
def test_contrast_over_sample(dark_mode):
    below = [i for i in range(200) if _text_contrast(derive_color(f"sample-{i}", dark_mode)) < 4.5]
    assert below == []


@pytest.mark.parametrize(
    'text',
    ["", "red", "green", "blue", "🎨", "🚀", "⚡", " ", "  ", "\t", "\n", "   \n\t  ", "a" * 10000],
)
@pytest.mark.parametrize('dark_mode', [False, True])
def test_output_in_range(text, dark_mode):
    out = derive_color(text, dark_mode)
    assert _in_unit_range(out.rgb)
    assert out.contrast_ratio >= 4.5


def test_str_and_utf8_bytes_agree():
    assert derive_color("🎨") == derive_color("🎨".encode("utf-8"))
    assert generate(b"TestString", False) == derive_color("TestString")


def test_whitespace_is_not_normalized():
    assert derive_color(" x").rgb != derive_color("x").rgb


@pytest.mark.parametrize('dark_mode', [False, True])
def test_result_stays_in_curated_band(dark_mode):
    for i in range(50):
        out = derive_color(f"band{i}", dark_mode)
        assert 0.0 <= out.hue < 360.0
        assert 0.0 < out.chroma <= 0.30
        assert 0.50 <= out.lightness <= 0.68
        if dark_mode:
            assert out.lightness >= c.DARK_LIGHTNESS_FLOOR


def test_reported_contrast_matches_colors():
    out = derive_color("ContrastCheck")
    assert out.contrast_ratio == pytest.approx(_text_contrast(out), rel=1e-6)


def test_stricter_target_is_best_effort():
    out = derive_color("ContrastCheck", target=c.WCAG_AAA_NORMAL)
    assert _in_unit_range(out.rgb)
    assert out.contrast_ratio >= derive_color("ContrastCheck").contrast_ratio
    assert c.CONTRAST_LIGHTNESS_MIN <= out.lightness <= c.CONTRAST_LIGHTNESS_MAX


@pytest.mark.parametrize('style', list(InterfaceStyle))
def test_convenience_api(style):
    fill, text_rgb = color_pair("test", style)
    assert fill == color("test", style)
    assert text_rgb in (WHITE, BLACK)
    assert (text_rgb == WHITE) is prefers_white_text("test", style)


def test_default_style_is_light():
    assert color("test") == derive_color("test", False).rgb


def test_hash_token():
    assert hash_token("") == "e3b0c44298fc1c149afbf4c8"
    assert len(hash_token("Hello World!")) == 24
    assert hash_token("a") != hash_token("b")
