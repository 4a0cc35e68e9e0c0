"""
SimpleTable CLI

`simpletable layout` computes placements from a cell size table,
`simpletable plot` draws them.
"""

import argparse
import sys
from typing import List, Optional

from .cli import layout, plot

SUBCOMMANDS = (layout, plot)


def build_parser() -> argparse.ArgumentParser:
    """Top-level parser with one subparser per command module"""
    parser = argparse.ArgumentParser(
        prog='simpletable',
        description='SimpleTable: Row-major table layout for cells of known size'
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    for command in SUBCOMMANDS:
        command.add_parser(subparsers).set_defaults(handler=command.run)

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    args.handler(args)


if __name__ == "__main__":
    main()
