#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/core/contrast.py

from typing import Tuple

from . import config as c
from .luminance import relative_luminance_srgb


def contrast_ratio(lum_1: float, lum_2: float) -> float:
    """
    WCAG 2.1 contrast ratio between two relative luminances.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    l1, l2 = (lum_1, lum_2) if lum_1 >= lum_2 else (lum_2, lum_1)
    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def contrast_ratio_srgb(c1: Tuple[float, float, float], c2: Tuple[float, float, float]) -> float:
    """Contrast ratio between two gamma-encoded sRGB colors in [0, 1]."""
    return contrast_ratio(relative_luminance_srgb(*c1), relative_luminance_srgb(*c2))


def get_wcag_contrast(lum: float) -> dict:
    """
    Calculate WCAG contrast ratios against pure white and pure black.

    Source: Web Content Accessibility Guidelines (WCAG) 2.1
    Formula: (L1 + 0.05) / (L2 + 0.05), where L is the relative luminance.
    """

    contrast_white = contrast_ratio(lum, c.LUM_WHITE)
    contrast_black = contrast_ratio(lum, c.LUM_BLACK)

    def get_pass_fail(ratio: float) -> dict:
        return {
            "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
            "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
            "AAA-Large": "Pass" if ratio >= c.WCAG_AAA_LARGE else "Fail",
            "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
        }

    return {
        "white": {
            "ratio": round(contrast_white, c.EXP_2),
            "levels": get_pass_fail(contrast_white)
        },
        "black": {
            "ratio": round(contrast_black, c.EXP_2),
            "levels": get_pass_fail(contrast_black)
        },
    }
