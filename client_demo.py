#!/usr/bin/env python3
#
# PROJECT: ascii-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import sys

from ascii_renderer.demo import main as demo_main


def single_char(value):
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected one character, got {value!r}")
    return value


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                               Spinning demo cube
  %(prog)s --wobble                      Cube that breathes while it spins
  %(prog)s face.obj --scale 0.01         Load an OBJ model, scaled down
  %(prog)s face.obj --char '*' --fps 15  Custom glyph and frame cap
"""
    parser = argparse.ArgumentParser(
        description="ASCII Wireframe Renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to .obj file")
    parser.add_argument("--char", type=single_char, default=None,
                        help="Character used for edges (default: #)")
    parser.add_argument("--fps", type=float, default=None,
                        help="Frame rate cap (default: 25)")
    parser.add_argument("--scale", type=float, default=1.0,
                        help="Uniform scale applied to a loaded model (default: 1.0)")
    parser.add_argument("--wobble", action="store_true",
                        help="Pulse the mesh scale over time")
    parser.add_argument("--log-file", default=None,
                        help="Write debug logging to this file")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=logging.DEBUG,
                            format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        curses.wrapper(lambda s: demo_main(s, args))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.getLogger(__name__).exception("demo crashed")
        sys.exit(1)
