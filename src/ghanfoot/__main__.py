"""Command-line interface."""
import argparse
import logging
import sys
from typing import Optional, Sequence

from ghanfoot.main import main


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghanfoot",
        description="Ghan-foot volume calculator for timber logs.",
    )
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def cli(argv: Optional[Sequence[str]] = None) -> int:
    args, qt_args = build_parser().parse_known_args(argv)
    level = logging.DEBUG if args.debug else None
    return main([sys.argv[0], *qt_args], level=level, log_file=args.log_file)


if __name__ == "__main__":
    sys.exit(cli())
