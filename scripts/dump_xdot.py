#!/usr/bin/env python3
"""Parse an xdot drawing attribute and print its operations."""

import argparse
import sys
from pathlib import Path

from xdotdraw.config import DrawConfig
from xdotdraw.utils.geometry import bounding_box
from xdotdraw.utils.logging_config import setup_logging
from xdotdraw.xdot.interpreter import DrawInterpreter
from xdotdraw.xdot.parser import MalformedOperandError, XDotParser


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Dump xdot drawing operations")
    parser.add_argument("attribute", nargs="?", help="Drawing attribute value")
    parser.add_argument("--file", type=Path, help="Read the attribute from a file")
    parser.add_argument("--state", action="store_true",
                        help="Print the cumulative draw state with each operation")
    parser.add_argument("--apply-style", action="store_true",
                        help="Fold Style operations into the draw state")
    parser.add_argument("--bbox", action="store_true", help="Print the bounding box")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--log-json", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(args.log_level, json_mode=args.log_json)

    if args.file is not None:
        raw = args.file.read_text(encoding="utf-8")
    elif args.attribute is not None:
        raw = args.attribute
    else:
        raw = sys.stdin.read()

    config = DrawConfig(apply_style=args.apply_style)
    try:
        ops = XDotParser(config).parse(raw)
    except MalformedOperandError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.state:
        for state, op in DrawInterpreter(config).collect(ops):
            print(f"{op}  [fill={state.fill_color} pen={state.pen_color} "
                  f"font={state.font} style={state.style}]")
    else:
        for op in ops:
            print(op)

    if args.bbox:
        print(f"bbox: {bounding_box(ops)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
