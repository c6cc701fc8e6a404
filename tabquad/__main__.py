"""Console entry point: python -m tabquad < table.txt"""

import argparse
import sys

from tabquad.driver import SessionSpec, run_session
from tabquad.logging_config import configure_from_env, enable_console_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabquad",
        description="Integrate a tabulated function read from stdin: "
                    "N, then N argument values, then N function values",
    )
    parser.add_argument("--middle", dest="show_middle", action="store_true",
                        default=False,
                        help="also print the middle rectangle estimate")
    parser.add_argument("--log-level", dest="log_level", default=None,
                        help="enable console logging at this level")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        enable_console_logging(level=args.log_level)
    else:
        configure_from_env()
    return run_session(spec=SessionSpec(show_middle=args.show_middle))


if __name__ == "__main__":
    sys.exit(main())
