#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/core/conversions.py

import math
from typing import Tuple

from . import config as c
from chromatag.shared.clamping import _clamp01
from chromatag.shared.sanitizer import normalize_hex


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH to OKLab."""
    h_rad = math.radians(hue)
    a = chroma * math.cos(h_rad)
    b = chroma * math.sin(h_rad)
    return L, a, b


def oklab_to_linear_srgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to unclamped linear sRGB."""
    l_ = L + c.OKLAB_TO_LMS_PRIME_LA * a + c.OKLAB_TO_LMS_PRIME_LB * b
    m_ = L + c.OKLAB_TO_LMS_PRIME_MA * a + c.OKLAB_TO_LMS_PRIME_MB * b
    s_ = L + c.OKLAB_TO_LMS_PRIME_SA * a + c.OKLAB_TO_LMS_PRIME_SB * b

    l_lin = l_ * l_ * l_
    m_lin = m_ * m_ * m_
    s_lin = s_ * s_ * s_

    r_lin = c.OKLAB_LMS_TO_SRGB_RL * l_lin + c.OKLAB_LMS_TO_SRGB_RM * m_lin + c.OKLAB_LMS_TO_SRGB_RS * s_lin
    g_lin = c.OKLAB_LMS_TO_SRGB_GL * l_lin + c.OKLAB_LMS_TO_SRGB_GM * m_lin + c.OKLAB_LMS_TO_SRGB_GS * s_lin
    b_lin = c.OKLAB_LMS_TO_SRGB_BL * l_lin + c.OKLAB_LMS_TO_SRGB_BM * m_lin + c.OKLAB_LMS_TO_SRGB_BS * s_lin

    return r_lin, g_lin, b_lin


def oklch_to_linear_srgb(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Direct OKLCH to linear sRGB conversion. Channels may leave [0, 1]."""
    return oklab_to_linear_srgb(*oklch_to_oklab(L, chroma, hue))


def linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component, clamping it into [0, 1] first."""
    l_val = _clamp01(l_val)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def linear_to_srgb_rgb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Gamma-encode a linear sRGB triple."""
    return linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)


def srgb_to_linear(color_comp: float) -> float:
    """Linearize a gamma-encoded sRGB component in [0, 1]."""
    c_norm = _clamp01(color_comp)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def srgb_to_linear_rgb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Linearize a gamma-encoded sRGB triple."""
    return srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert unit RGB components to a hex string."""
    r_i = int(round(_clamp01(r) * c.RGB_MAX))
    g_i = int(round(_clamp01(g) * c.RGB_MAX))
    b_i = int(round(_clamp01(b) * c.RGB_MAX))
    return f"{r_i:02X}{g_i:02X}{b_i:02X}"


def hex_to_rgb(hex_code: str) -> Tuple[float, float, float]:
    """Convert a hex string to unit RGB components."""
    h = normalize_hex(hex_code)
    if not h:
        return (0.0, 0.0, 0.0)
    return tuple(int(h[i : i + 2], 16) / c.RGB_MAX for i in (0, 2, 4))
