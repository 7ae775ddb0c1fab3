#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/shared/formatting.py

from chromatag.core import config as c


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        r, g, b = (int(round(v * c.RGB_MAX)) for v in args)
        return f"rgb({r}, {g}, {b})"
    elif fmt == 'oklch':
        return f"oklch({args[0]:.4f} {args[1]:.4f} {args[2]:.4f}deg)"

    return ""


def preview_text(text: str) -> str:
    """Single-line, length-limited form of an input for terminal labels."""
    flat = text.replace("\n", "\\n").replace("\t", "\\t")
    if len(flat) > c.MAX_TEXT_PREVIEW:
        return flat[: c.MAX_TEXT_PREVIEW - 1] + "…"
    return flat
