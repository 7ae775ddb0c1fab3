#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/logic/derive/resolver.py

import argparse
import sys
from typing import List

from chromatag.core.generator import InterfaceStyle
from chromatag.shared.logger import log


def resolve_texts(args: argparse.Namespace) -> List[str]:
    """Collect input strings from -t/--text and, when asked, stdin lines."""
    texts = list(args.text or [])

    if getattr(args, "stdin", False):
        texts.extend(line.rstrip("\r\n") for line in sys.stdin)

    if not texts:
        log("error", "one of the arguments -t/--text --stdin is required")
        log("info", "use 'chromatag --help' for more information")
        sys.exit(2)

    return texts


def resolve_styles(style: str) -> List[InterfaceStyle]:
    if style == "both":
        return [InterfaceStyle.LIGHT, InterfaceStyle.DARK]
    return [InterfaceStyle(style)]
