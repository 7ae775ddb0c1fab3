#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/core/luminance.py

from .conversions import srgb_to_linear
from . import config as c
from chromatag.shared.clamping import _clamp01


def relative_luminance_linear(r: float, g: float, b: float) -> float:
    return (
        c.LUMA_R * _clamp01(r) +
        c.LUMA_G * _clamp01(g) +
        c.LUMA_B * _clamp01(b)
    )


def relative_luminance_srgb(r: float, g: float, b: float) -> float:
    return (
        c.LUMA_R * srgb_to_linear(r) +
        c.LUMA_G * srgb_to_linear(g) +
        c.LUMA_B * srgb_to_linear(b)
    )
