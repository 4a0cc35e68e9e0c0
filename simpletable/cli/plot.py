"""Plot subcommand - visualization"""

from __future__ import annotations
from typing import Tuple
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..config import RenderConfig
from ..io import read_placements
from ..layout.types import Size
from ..visualizer import TableRenderer

logger = logging.getLogger(__name__)

PRESETS = {
    'default': RenderConfig,
    'publication': RenderConfig.publication,
    'debug': RenderConfig.debug,
}


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add plot subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for plot subcommand
    """
    parser = subparsers.add_parser(
        'plot',
        help='Draw a computed table layout'
    )

    parser.add_argument('--prefix', required=True,
                        help='Prefix (matches layout output)')
    parser.add_argument('--input-dir', required=True,
                        help='Input directory containing .simpletable_layout.tsv from layout')
    parser.add_argument('--output-dir',
                        help='Output directory (default: same as input-dir)')

    # Optional
    parser.add_argument('--figsize', nargs=2, type=float, default=None,
                        help='Figure size (width height) in inches')
    parser.add_argument('--preset', choices=sorted(PRESETS), default='default',
                        help='Rendering preset (default: default)')
    parser.add_argument('--no-labels', action='store_true',
                        help='Do not print cell indices')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    input_dir = Path(args.input_dir)
    output_dir = Path(args.output_dir) if args.output_dir else input_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    input_file = input_dir / f"{args.prefix}.simpletable_layout.tsv"
    plot_file = output_dir / f"{args.prefix}.simpletable.png"

    logger.info(f"Prefix: {args.prefix}")
    logger.info(f"Input: {input_file}")
    logger.info(f"Output: {plot_file}")

    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}\n"
                                f"Did you run 'simpletable layout --prefix {args.prefix}' first?")

    placements, metadata = read_placements(str(input_file))
    logger.info(f"Loaded {len(placements)} placements")

    config = PRESETS[args.preset]()
    if args.no_labels:
        config.show_labels = False

    figsize = tuple(args.figsize) if args.figsize else None
    renderer = TableRenderer(config)
    renderer.plot(
        placements=placements,
        total_size=Size(metadata['total_width'], metadata['total_height']),
        output_file=str(plot_file),
        title=args.prefix,
        figsize=figsize  # type: ignore[arg-type]
    )

    logger.info(f"✓ Plot saved: {plot_file}")
