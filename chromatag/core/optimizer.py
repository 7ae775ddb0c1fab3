#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/core/optimizer.py

from typing import NamedTuple, Optional, Tuple

from . import config as c
from .contrast import contrast_ratio
from .conversions import oklch_to_linear_srgb
from .gamut import map_to_gamut
from .luminance import relative_luminance_linear
from chromatag.shared.clamping import _clamp_range


class OptimizeResult(NamedTuple):
    lightness: float
    chroma: float
    linear_rgb: Tuple[float, float, float]
    iterations: int


def text_contrasts(linear_rgb: Tuple[float, float, float]) -> Tuple[float, float]:
    """Contrast of a linear sRGB background against white and black text."""
    lum = relative_luminance_linear(*linear_rgb)
    return contrast_ratio(lum, c.LUM_WHITE), contrast_ratio(lum, c.LUM_BLACK)


def prefer_white_text(linear_rgb: Tuple[float, float, float]) -> bool:
    """White text wins ties."""
    c_white, c_black = text_contrasts(linear_rgb)
    return c_white >= c_black


def optimize(
    L: float,
    chroma: float,
    hue: float,
    linear_rgb: Optional[Tuple[float, float, float]] = None,
    target: float = c.CONTRAST_TARGET,
) -> OptimizeResult:
    """
    Nudge lightness until white or black text reaches `target` contrast.

    Lightness moves toward whichever text color already contrasts better,
    staying within [CONTRAST_LIGHTNESS_MIN, CONTRAST_LIGHTNESS_MAX]; each
    move is followed by a tighter gamut remap, so chroma may shrink too. The
    step starts at CONTRAST_STEP and decays geometrically. When the budget
    runs out first, the state with the highest contrast seen is returned.
    """
    target = _clamp_range(target, c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO)
    lin = linear_rgb if linear_rgb is not None else oklch_to_linear_srgb(L, chroma, hue)

    best = OptimizeResult(L, chroma, lin, 0)
    best_score = -1.0
    step = c.CONTRAST_STEP
    i = 0

    while i < c.CONTRAST_MAX_ITERATIONS:
        c_white, c_black = text_contrasts(lin)
        score = max(c_white, c_black)
        if score >= best_score:
            best, best_score = OptimizeResult(L, chroma, lin, i), score
        if score >= target:
            return best

        if c_white >= c_black:
            L = max(c.CONTRAST_LIGHTNESS_MIN, L - step)
        else:
            L = min(c.CONTRAST_LIGHTNESS_MAX, L + step)

        L, chroma, lin = map_to_gamut(L, chroma, hue, c.REMAP_CHROMA_FACTOR, c.REMAP_MAX_ITERATIONS)
        i += 1
        step *= c.CONTRAST_STEP_DECAY

    if max(text_contrasts(lin)) >= best_score:
        return OptimizeResult(L, chroma, lin, i)
    return best
