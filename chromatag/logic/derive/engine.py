#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/logic/derive/engine.py

import argparse
from typing import Dict, Any

from chromatag import derive_color, hash_token
from chromatag.core import config as c
from chromatag.core.contrast import get_wcag_contrast
from chromatag.core.conversions import rgb_to_hex
from chromatag.core.generator import DerivedColor, InterfaceStyle
from chromatag.core.luminance import relative_luminance_srgb
from chromatag.shared.formatting import preview_text
from chromatag.shared.logger import log
from .resolver import resolve_texts, resolve_styles
from .renderer import render_color_info, render_json


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the derive command"""

    # If --all-tech-infos is used, activate every key in TECH_INFO_KEYS
    if getattr(args, "all_tech_infos", False):
        for key in c.TECH_INFO_KEYS:
            setattr(args, key, True)

    texts = resolve_texts(args)
    styles = resolve_styles(args.style)

    records = []
    for text in texts:
        for style in styles:
            out = derive_color(text, style.is_dark, args.target)
            records.append(get_color_data(text, style, out))
            if out.contrast_ratio < args.target:
                log(
                    "warning",
                    f"'{preview_text(text)}' ({style.value}) reaches only "
                    f"{out.contrast_ratio:.2f}:1, below the {args.target:.2f}:1 target",
                )

    if args.format == "text":
        render_color_info(records, args)
    else:
        render_json(records, pretty=args.format == "prettyjson")


def get_color_data(text: str, style: InterfaceStyle, out: DerivedColor) -> Dict[str, Any]:
    """Flatten a derived color into the record shared by both renderers."""
    luminance = relative_luminance_srgb(*out.rgb)
    return {
        "text": text,
        "style": style.value,
        "hex": f"#{rgb_to_hex(*out.rgb)}",
        "rgb": [out.red, out.green, out.blue],
        "prefer_white_text": out.prefer_white_text,
        "text_color": f"#{rgb_to_hex(*out.text_rgb)}",
        "contrast_ratio": round(out.contrast_ratio, 4),
        "luminance": luminance,
        "oklch": [out.lightness, out.chroma, out.hue],
        "token": hash_token(text),
        "wcag": get_wcag_contrast(luminance),
    }
