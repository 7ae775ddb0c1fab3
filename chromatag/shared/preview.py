#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/shared/preview.py

import re

from chromatag.core.conversions import hex_to_rgb
from chromatag.core import config as c


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def _ansi_rgb(hex_code: str):
    return tuple(int(round(v * c.RGB_MAX)) for v in hex_to_rgb(hex_code))


def print_color_block(hex_code: str, title: str = "color", sample: str = "", white_text: bool = True, end: str = "\n") -> None:
    r, g, b = _ansi_rgb(hex_code)
    fg = 255 if white_text else 0
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)
    label = sample.center(16) if len(sample) <= 16 else sample[:15] + "…"

    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{r};{g};{b}m\033[38;2;{fg};{fg};{fg}m{label}{c.RESET}  "
        f"{c.BOLD_WHITE}#{hex_code}{c.RESET}",
        end=end,
    )
