#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/main.py

import argparse
import sys

from chromatag import __version__
from chromatag.core import config as c
from chromatag.logic.derive import engine
from chromatag.subcommands.command_registry import SUBCOMMANDS
from chromatag.shared.logger import log, ChromatagArgumentParser
from chromatag.shared.sanitizer import INPUT_HANDLERS
from chromatag.shared.truecolor import ensure_truecolor


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main derive command."""
    parser = ChromatagArgumentParser(
        prog="chromatag",
        description="chromatag: stable, accessible identity colors derived from strings",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"chromatag {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    # Input Group
    input_group = parser.add_argument_group("input")
    input_group.add_argument(
        "-t",
        "--text",
        action="append",
        type=INPUT_HANDLERS["text"],
        help="input string, use -t TEXT multiple times for several inputs",
    )
    input_group.add_argument(
        "--stdin",
        action="store_true",
        help="read one input string per line from stdin",
    )
    input_group.add_argument(
        "-st",
        "--style",
        type=INPUT_HANDLERS["style"],
        choices=c.STYLE_CHOICES,
        default="light",
        help="interface style to derive for (default: light)",
    )
    input_group.add_argument(
        "-T",
        "--target",
        type=INPUT_HANDLERS["target"],
        default=c.CONTRAST_TARGET,
        help=f"contrast goal against white or black text (default: {c.CONTRAST_TARGET})",
    )

    # Output
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "-f",
        "--format",
        type=INPUT_HANDLERS["output_format"],
        choices=c.OUTPUT_FORMATS,
        default="text",
        help="output format (default: text)",
    )
    output_group.add_argument(
        "--json",
        dest="format",
        action="store_const",
        const="json",
        help="shorthand for --format json",
    )

    # Technical Information Flags
    info_group = parser.add_argument_group("technical information flags")
    info_group.add_argument(
        "-all",
        "--all-tech-infos",
        action="store_true",
        help="show all technical information",
    )
    info_group.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual color bars",
    )
    info_group.add_argument(
        "-rgb",
        "--red-green-blue",
        action="store_true",
        dest="rgb",
        help="show RGB values",
    )
    info_group.add_argument(
        "-l",
        "--luminance",
        action="store_true",
        help="show relative luminance",
    )
    info_group.add_argument(
        "--oklch",
        action="store_true",
        dest="oklch",
        help="show final OKLCH values",
    )
    info_group.add_argument(
        "-wcag",
        "--contrast",
        action="store_true",
        help="show WCAG contrast ratios",
    )
    info_group.add_argument(
        "--token",
        action="store_true",
        help="show the hash token of the input",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core derive command."""
    parser = get_color_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    engine.run(args, parser)


def main() -> None:
    """Main entry point for chromatag CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
