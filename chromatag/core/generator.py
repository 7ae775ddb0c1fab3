#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/core/generator.py

import enum
from typing import NamedTuple, Tuple

from . import config as c
from .contrast import contrast_ratio
from .conversions import linear_to_srgb_rgb
from .digest import digest
from .gamut import map_to_gamut
from .luminance import relative_luminance_linear
from .optimizer import optimize, prefer_white_text
from .seed import extract


class InterfaceStyle(enum.Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def is_dark(self) -> bool:
        return self is InterfaceStyle.DARK


class DerivedColor(NamedTuple):
    """Gamma-encoded sRGB fill plus the text color that reads best on it."""

    red: float
    green: float
    blue: float
    prefer_white_text: bool
    contrast_ratio: float
    lightness: float
    chroma: float
    hue: float

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return self.red, self.green, self.blue

    @property
    def text_rgb(self) -> Tuple[float, float, float]:
        return (1.0, 1.0, 1.0) if self.prefer_white_text else (0.0, 0.0, 0.0)


def generate(data: bytes, is_dark: bool, target: float = c.CONTRAST_TARGET) -> DerivedColor:
    """digest -> seed -> gamut map -> contrast optimization -> sRGB."""
    hue, chroma, L = extract(digest(data), is_dark)

    L, chroma, lin = map_to_gamut(L, chroma, hue)
    L, chroma, lin, _ = optimize(L, chroma, hue, lin, target)

    white = prefer_white_text(lin)
    text_lum = c.LUM_WHITE if white else c.LUM_BLACK
    ratio = contrast_ratio(relative_luminance_linear(*lin), text_lum)

    r, g, b = linear_to_srgb_rgb(*lin)
    return DerivedColor(r, g, b, white, ratio, L, chroma, hue)
