#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/logic/audit/renderer.py

from typing import Any, Dict

from chromatag.core import config as c
from chromatag.shared.logger import log


def render_audit(report: Dict[str, Any]) -> None:
    """Print the spread per style, then every input flagged for review."""
    print()
    for style, stats in report["styles"].items():
        label = f"{c.MSG_BOLD_COLORS['info']}{style}{c.RESET}"
        print(
            f"{label}{' ' * (18 - len(style))}{c.BOLD_WHITE}:{c.RESET} "
            f"{stats['distinct']}/{report['count']} distinct, "
            f"min contrast {stats['min_contrast']:.2f}:1"
        )
    print()

    if not report["failures"]:
        log("success", f"all inputs reach {report['target']:.2f}:1")
        return

    for failure in report["failures"]:
        log(
            "warning",
            f"'{failure['text']}' ({failure['style']}) reaches only {failure['contrast_ratio']:.2f}:1",
        )
    log("error", f"{len(report['failures'])} input(s) below {report['target']:.2f}:1, review manually")
