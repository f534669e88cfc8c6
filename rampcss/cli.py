"""Command-line entry point: ``rampcss ramp|tokens|init``."""
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

from .defaults import DEFAULT_GAMUT_MODE
from .palette import PaletteDocument
from .ramp import STOP_SETS, generate_ramp9
from .types.color_types import GamutMode

logger = logging.getLogger(__name__)


def _cmd_ramp(args: argparse.Namespace) -> int:
    ramp = generate_ramp9(args.color, args.stops, args.gamut)
    if args.json:
        print(json.dumps({str(step): value for step, value in ramp.items()}, indent=2))
    else:
        for step, value in ramp.items():
            print(f"{step} {value}")
    return 0


def _cmd_tokens(args: argparse.Namespace) -> int:
    doc = PaletteDocument.load(args.document) if args.document else PaletteDocument.default()
    if args.stops:
        doc.stop_set = args.stops
    bundle = doc.bundle(args.gamut)
    text = bundle.css if args.format == "css" else bundle.to_json()
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("Wrote %s tokens to %s", args.format, args.output)
    else:
        print(text)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    PaletteDocument.default().dump(args.path)
    logger.info("Wrote default palette document to %s", args.path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rampcss",
        description="Generate 9-step OKLCH color ramps and export CSS design tokens.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    sub = parser.add_subparsers(dest="command", required=True)

    gamut_choices = [mode.value for mode in GamutMode]

    p_ramp = sub.add_parser("ramp", help="Print the 100..900 ramp for one color")
    p_ramp.add_argument("color", help="Base color, e.g. '#1c2e7a'")
    p_ramp.add_argument("--stops", choices=sorted(STOP_SETS), default="figma")
    p_ramp.add_argument("--gamut", choices=gamut_choices, default=DEFAULT_GAMUT_MODE.value)
    p_ramp.add_argument("--json", action="store_true", help="Print a JSON object instead of lines")
    p_ramp.set_defaults(func=_cmd_ramp)

    p_tokens = sub.add_parser("tokens", help="Build tokens.css / tokens.json for a palette document")
    p_tokens.add_argument("document", nargs="?", help="Palette document (JSON); default palette if omitted")
    p_tokens.add_argument("--format", choices=("css", "json"), default="css")
    p_tokens.add_argument("-o", "--output", help="Write to this file instead of stdout")
    p_tokens.add_argument("--stops", choices=sorted(STOP_SETS), help="Override the document's stop set")
    p_tokens.add_argument("--gamut", choices=gamut_choices, default=DEFAULT_GAMUT_MODE.value)
    p_tokens.set_defaults(func=_cmd_tokens)

    p_init = sub.add_parser("init", help="Write the default palette document")
    p_init.add_argument("path")
    p_init.set_defaults(func=_cmd_init)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.func(args)
    except (ValueError, KeyError, OSError) as e:
        # RampError is a ValueError
        print(f"error: {e}", file=sys.stderr)
        return 1
