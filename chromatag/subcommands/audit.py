#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/subcommands/audit.py

import argparse
import sys

from chromatag.core import config as c
from chromatag.logic.audit import engine
from chromatag.shared.logger import ChromatagArgumentParser
from chromatag.shared.sanitizer import INPUT_HANDLERS


def get_audit_parser() -> argparse.ArgumentParser:
    """Create argument parser for audit command."""
    parser = ChromatagArgumentParser(
        prog="chromatag audit",
        description="chromatag audit: check spread and contrast over generated inputs",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=c.DEFAULT_AUDIT_COUNT,
        help=f"number of inputs (default: {c.DEFAULT_AUDIT_COUNT}, max: {c.MAX_COUNT})",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        type=INPUT_HANDLERS["text"],
        default=c.DEFAULT_AUDIT_PREFIX,
        help=f"inputs are PREFIX0, PREFIX1, ... (default: {c.DEFAULT_AUDIT_PREFIX})",
    )
    parser.add_argument(
        "-st",
        "--style",
        type=INPUT_HANDLERS["style"],
        choices=c.STYLE_CHOICES,
        default="both",
        help="interface style to audit (default: both)",
    )
    parser.add_argument(
        "-T",
        "--target",
        type=INPUT_HANDLERS["target"],
        default=c.CONTRAST_TARGET,
        help=f"contrast goal against white or black text (default: {c.CONTRAST_TARGET})",
    )
    return parser


def main() -> None:
    """Main entry point for audit command."""
    parser = get_audit_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args, parser)


if __name__ == "__main__":
    main()
