"""Layout subcommand - compute cell placements from intrinsic sizes"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..config import TableLayoutConfig
from ..layout import TableLayoutEngine, Point
from ..io import read_cell_sizes, write_placements

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add layout subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for layout subcommand
    """
    parser = subparsers.add_parser(
        'layout',
        help='Compute table layout from cell sizes'
    )

    # Sample identification
    parser.add_argument('--prefix', required=True,
                        help='Prefix for output files')
    parser.add_argument('--output-dir', default='.',
                        help='Output directory (default: current directory)')

    # Input
    parser.add_argument('-i', '--input', required=True,
                        help='TSV file with width and height columns, one cell per line')

    # Layout options
    parser.add_argument('-c', '--columns', type=int, required=True,
                        help='Number of columns')
    parser.add_argument('--equal-column-widths', action='store_true',
                        help='Give every column the width of the widest column')
    parser.add_argument('--equal-row-heights', action='store_true',
                        help='Give every row the height of the tallest row')
    parser.add_argument('--aspect-ratio', type=float, default=None,
                        help='Cell width / height; overrides the equal-* options')
    parser.add_argument('--origin', nargs=2, type=float, default=[0.0, 0.0], metavar=('X', 'Y'),
                        help='Offset added to every cell origin (default: 0 0)')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    config = TableLayoutConfig(
        columns_count=args.columns,
        equal_column_widths=args.equal_column_widths,
        equal_row_heights=args.equal_row_heights,
        cell_aspect_ratio=args.aspect_ratio
    )
    config.validate()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / f"{args.prefix}.simpletable_layout.tsv"

    logger.info(f"Prefix: {args.prefix}")
    logger.info(f"Input: {args.input}")
    logger.info(f"Output: {output_file}")
    logger.info(f"Columns: {config.columns_count}, equal widths: {config.equal_column_widths}, "
                f"equal heights: {config.equal_row_heights}, aspect ratio: {config.cell_aspect_ratio}")

    cell_sizes = read_cell_sizes(args.input)

    engine = TableLayoutEngine(config)
    result = engine.compute_layout(cell_sizes)
    origin_x, origin_y = args.origin
    placements = engine.placements(result, origin=Point(origin_x, origin_y))

    total = engine.total_size(result)
    logger.info(f"Table: {result.n_columns} columns x {result.n_rows} rows, "
                f"size {total.width:g} x {total.height:g}")

    write_placements(result, placements, str(output_file), config.columns_count)

    logger.info(f"✓ Layout saved: {output_file}")
