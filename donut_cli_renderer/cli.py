#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import argparse
import logging
import sys

from . import terminal
from .color import AVAILABLE_COLORS, DEFAULT_COLOR
from .config import RenderConfig
from .driver import FrameDriver

logger = logging.getLogger(__name__)

EXIT_SETUP_ERROR = 1


def build_parser():
    epilog = f"""\
Press 'q' or ESC to quit.

arguments:
  color   {', '.join(AVAILABLE_COLORS)}
          German names are accepted too (gruen, rot, blau, gelb, weiss).
  speed   > 1.0: faster, < 1.0: slower.

examples:
  %(prog)s                 Green donut at normal speed
  %(prog)s red             Red donut
  %(prog)s cyan 2.5        Cyan donut, two and a half times as fast
  %(prog)s weiss 0.5       White donut at half speed
"""
    parser = argparse.ArgumentParser(
        description="Spinning ASCII donut for the terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("color", nargs='?', default=DEFAULT_COLOR,
                        help=f"Color name (default: {DEFAULT_COLOR})")
    parser.add_argument("speed", nargs='?', default=None,
                        help="Positive speed factor (default: 1.0)")
    parser.add_argument("extra", nargs='*', help=argparse.SUPPRESS)
    return parser


def parse_args(argv=None):
    """
    Parse the command line.  Surplus positionals only produce a warning.

    -h/--help is the only option; anything else that starts with '-'
    (e.g. a speed of '-1e3') is still taken as a positional value.
    """
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        # argparse split the positionals around option-like tokens;
        # reassign them in command-line order.
        values = [tok for tok in argv if tok != '--']
        args.color = values[0] if values else DEFAULT_COLOR
        args.speed = values[1] if len(values) > 1 else None
        args.extra = values[2:]
    if args.extra:
        logger.warning("Too many arguments. Use '%s --help' for help.",
                       parser.prog)
    return args


def main(argv=None) -> int:
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING,
                        format="%(levelname)s: %(message)s")
    args = parse_args(argv)
    config = RenderConfig.from_args(args)

    try:
        with terminal.raw_mode() as handle:
            driver = FrameDriver(config, terminal.InputPoller(handle.fd))
            return driver.run()
    except terminal.TerminalSetupError as exc:
        logger.error("%s", exc)
        return EXIT_SETUP_ERROR
