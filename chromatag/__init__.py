#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/__init__.py

"""
chromatag: stable, accessible identity colors derived from strings.

    >>> from chromatag import derive_color
    >>> out = derive_color("Hello World!")
    >>> out.rgb, out.prefer_white_text

The same text always yields the same color. Fills come from a curated
OKLCH band and reach 4.5:1 contrast against either white or black text.
Callers that track a system appearance re-invoke with the new mode.
"""

from typing import Tuple, Union

from chromatag.core import config as c
from chromatag.core import digest as _digest
from chromatag.core.generator import DerivedColor, InterfaceStyle, generate

__version__ = "0.1.0"

TextInput = Union[str, bytes, bytearray]
RGB = Tuple[float, float, float]


def derive_color(text: TextInput, dark_mode: bool = False, target: float = c.CONTRAST_TARGET) -> DerivedColor:
    """Derive the fill color and text preference for `text`."""
    return generate(_digest.to_bytes(text), bool(dark_mode), target)


def color(text: TextInput, style: InterfaceStyle = InterfaceStyle.LIGHT) -> RGB:
    """Fill color for a fixed interface style."""
    return derive_color(text, style.is_dark).rgb


def color_pair(text: TextInput, style: InterfaceStyle = InterfaceStyle.LIGHT) -> Tuple[RGB, RGB]:
    """Fill color and black or white text color for a fixed interface style."""
    out = derive_color(text, style.is_dark)
    return out.rgb, out.text_rgb


def prefers_white_text(text: TextInput, style: InterfaceStyle = InterfaceStyle.LIGHT) -> bool:
    return derive_color(text, style.is_dark).prefer_white_text


def hash_token(text: TextInput) -> str:
    """Stable hex token identifying `text`, usable as a color name."""
    return _digest.hash_token(_digest.to_bytes(text))


__all__ = [
    "DerivedColor",
    "InterfaceStyle",
    "__version__",
    "color",
    "color_pair",
    "derive_color",
    "hash_token",
    "prefers_white_text",
]
