#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/core/seed.py

from typing import Tuple

from . import config as c


def _unit(data: bytes, index: int) -> float:
    return data[index] / c.BYTE_MAX


def extract(data: bytes, is_dark: bool) -> Tuple[float, float, float]:
    """
    Map digest bytes to the seed (hue, chroma, lightness) of a color.

    Hue mixes a second byte in at a quarter weight so it never hinges on a
    single byte. Chroma and lightness are confined to curated bands, then
    lightness gets a floor in dark mode and a ceiling in light mode.
    """
    if len(data) < c.SEED_BYTES:
        raise ValueError(f"digest must hold at least {c.SEED_BYTES} bytes")

    raw_h = (_unit(data, c.HUE_BYTE) + _unit(data, c.HUE_JITTER_BYTE) * c.HUE_JITTER_WEIGHT) * c.HUE_MAX
    h = raw_h % c.HUE_MAX

    chroma = c.CHROMA_BASE + _unit(data, c.CHROMA_BYTE) * c.CHROMA_SPAN
    L = c.LIGHTNESS_BASE + _unit(data, c.LIGHTNESS_BYTE) * c.LIGHTNESS_SPAN

    if is_dark:
        L = max(L, c.DARK_LIGHTNESS_FLOOR)
    else:
        L = min(L, c.LIGHT_LIGHTNESS_CEIL)

    return h, chroma, L
