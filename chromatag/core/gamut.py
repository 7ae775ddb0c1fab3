#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/core/gamut.py

from typing import Tuple

from . import config as c
from .conversions import oklch_to_linear_srgb


def in_gamut(rgb: Tuple[float, float, float], eps: float = c.GAMUT_EPS) -> bool:
    """True when every linear channel lies within [-eps, 1 + eps]."""
    return all(-eps <= v <= c.UNIT + eps for v in rgb)


def map_to_gamut(
    L: float,
    chroma: float,
    hue: float,
    factor: float = c.GAMUT_CHROMA_FACTOR,
    max_iter: int = c.GAMUT_MAX_ITERATIONS,
) -> Tuple[float, float, Tuple[float, float, float]]:
    """
    Pull an OKLCH color into linear sRGB by chroma reduction.

    Lightness and hue are preserved; chroma is scaled by `factor` until the
    color fits or `max_iter` reductions have been made. Past the cap the last
    value is returned as-is and gamma encoding clamps it.
    """
    lin = oklch_to_linear_srgb(L, chroma, hue)
    steps = 0
    while steps < max_iter and not in_gamut(lin):
        chroma *= factor
        lin = oklch_to_linear_srgb(L, chroma, hue)
        steps += 1
    return L, chroma, lin
