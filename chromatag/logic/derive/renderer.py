#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/logic/derive/renderer.py

import argparse
import json
from typing import Any, Dict, List

from chromatag.core import config as c
from chromatag.shared.formatting import format_colorspace, preview_text
from chromatag.shared.preview import print_color_block


def _draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int) -> str:
    """Draw a ANSI-colored bar representation of a value."""
    total_len = 16
    percent = min(abs(val), max_val) / max_val
    filled = max(0, min(total_len, int(total_len * percent)))
    empty = total_len - filled

    color_ansi = f"\033[38;2;{r_c};{g_c};{b_c}m"
    reset_ansi = "\033[0m"
    empty_ansi = "\033[90m"

    return (
        f"{color_ansi}{'█' * filled}{reset_ansi}"
        f"{empty_ansi}{'░' * empty}{reset_ansi}"
    )


def _label(key: str) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{key}{c.RESET}{' ' * (18 - len(key))}{c.BOLD_WHITE}:"


def _render_contrast(record: Dict[str, Any]) -> None:
    r, g, b = (int(round(v * c.RGB_MAX)) for v in record["rgb"])
    wcag = record["wcag"]
    bg_ansi = f"\033[48;2;{r};{g};{b}m"
    reset, info_c = "\033[0m", c.MSG_BOLD_COLORS["info"]
    succ_c, err_c = c.MSG_BOLD_COLORS["success"], c.MSG_BOLD_COLORS["error"]

    def fmt_status(status: str) -> str:
        return f"{succ_c}Pass{info_c}" if status == "Pass" else f"{err_c}Fail{info_c}"

    def fmt_line(side: str) -> str:
        levels = wcag[side]["levels"]
        aa, aaa = fmt_status(levels["AA"]), fmt_status(levels["AAA"])
        return f"{wcag[side]['ratio']:5.2f}:1 {info_c}(AA:{aa}, AAA:{aaa}){c.RESET}"

    white_block = f"{bg_ansi}\033[1;38;2;255;255;255m{'white':^16}{reset}"
    black_block = f"{bg_ansi}\033[1;38;2;0;0;0m{'black':^16}{reset}"
    chosen = "white" if record["prefer_white_text"] else "black"

    print(f"\n                      {white_block}  {c.BOLD_WHITE}{fmt_line('white')}{c.RESET}")
    print(f"{_label('contrast')}{c.RESET}   {chosen} text, {record['contrast_ratio']:.2f}:1")
    print(f"                      {black_block}  {c.BOLD_WHITE}{fmt_line('black')}{c.RESET}")


def render_color_info(records: List[Dict[str, Any]], args: argparse.Namespace) -> None:
    """Strictly prints color information. Data must be pre-calculated by the engine."""
    hide_bars = getattr(args, "hide_bars", False)

    for record in records:
        print()
        title = f"{c.BOLD_WHITE}{preview_text(record['text'])}{c.RESET}"
        print_color_block(
            record["hex"].lstrip("#"),
            title,
            sample=record["style"],
            white_text=record["prefer_white_text"],
        )

        if getattr(args, "token", False):
            print(f"\n{_label('token')} {record['token']}{c.RESET}")

        if getattr(args, "luminance", False):
            lum = record["luminance"]
            print(f"\n{_label('luminance')} {lum:.6f}{c.RESET}")
            if not hide_bars:
                print(f"                    {c.BOLD_WHITE}L{c.RESET} {_draw_bar(lum, 1.0, 200, 200, 200)}")

        if getattr(args, "rgb", False):
            r, g, b = record["rgb"]
            print(f"\n{_label('rgb')} {format_colorspace('rgb', r, g, b)}{c.RESET}")
            if not hide_bars:
                print(f"                    {c.BOLD_WHITE}R{c.RESET} {_draw_bar(r, 1.0, 255, 60, 60)} {c.BOLD_WHITE}{r * 100:6.2f}%{c.RESET}")
                print(f"                    {c.BOLD_WHITE}G{c.RESET} {_draw_bar(g, 1.0, 60, 255, 60)} {c.BOLD_WHITE}{g * 100:6.2f}%{c.RESET}")
                print(f"                    {c.BOLD_WHITE}B{c.RESET} {_draw_bar(b, 1.0, 60, 80, 255)} {c.BOLD_WHITE}{b * 100:6.2f}%{c.RESET}")

        if getattr(args, "oklch", False):
            l_ok, c_ok, h_ok = record["oklch"]
            print(f"\n{_label('oklch')} {format_colorspace('oklch', l_ok, c_ok, h_ok)}{c.RESET}")
            if not hide_bars:
                print(f"                    {c.BOLD_WHITE}L{c.RESET} {_draw_bar(l_ok, 1.0, 200, 200, 200)}")
                print(f"                    {c.BOLD_WHITE}C{c.RESET} {_draw_bar(c_ok / 0.4, 1.0, 255, 60, 255)}")
                print(f"                    {c.BOLD_WHITE}H{c.RESET} {_draw_bar(h_ok, 360, 255, 200, 0)}")

        if getattr(args, "contrast", False):
            _render_contrast(record)

    print()


def render_json(records: List[Dict[str, Any]], pretty: bool = False) -> None:
    print(json.dumps(records, indent=2 if pretty else None, ensure_ascii=False))
