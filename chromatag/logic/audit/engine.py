#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/logic/audit/engine.py

import argparse
import sys
from typing import Any, Dict, List

from chromatag import derive_color
from chromatag.core.generator import InterfaceStyle
from chromatag.logic.derive.resolver import resolve_styles
from .renderer import render_audit


def audit(count: int, prefix: str, styles: List[InterfaceStyle], target: float) -> Dict[str, Any]:
    """
    Derive colors for prefix0..prefix{count-1} and collect spread and
    contrast statistics per style.
    """
    report: Dict[str, Any] = {
        "count": count,
        "prefix": prefix,
        "target": target,
        "styles": {},
        "failures": [],
    }

    for style in styles:
        seen = set()
        lowest = None
        for i in range(count):
            text = f"{prefix}{i}"
            out = derive_color(text, style.is_dark, target)
            seen.add(out.rgb)
            if lowest is None or out.contrast_ratio < lowest:
                lowest = out.contrast_ratio
            if out.contrast_ratio < target:
                report["failures"].append({
                    "text": text,
                    "style": style.value,
                    "contrast_ratio": out.contrast_ratio,
                })
        report["styles"][style.value] = {"distinct": len(seen), "min_contrast": lowest}

    return report


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the audit command"""
    report = audit(args.count, args.prefix, resolve_styles(args.style), args.target)
    render_audit(report)
    if report["failures"]:
        sys.exit(1)
