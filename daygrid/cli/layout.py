"""Layout subcommand - position a day's appointments"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from . import add_layout_arguments, configure_logging, layout_config_from_args, split_days
from ..io import read_events, write_layout
from ..layout import LayoutEngine

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
        help='Compute block positions for a day view'
    )

    add_layout_arguments(parser)

    parser.add_argument('-o', '--output',
                       help='Output file (default: <input stem>.layout.<format> next to the input)')
    parser.add_argument('--format', choices=['tsv', 'json'], default='tsv',
                       help='Output format (default: tsv)')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(getattr(args, "debug", False))

    input_file = Path(args.input)
    output_file = Path(args.output) if args.output else \
        input_file.with_name(f"{input_file.stem}.layout.{args.format}")

    logger.info(f"Input: {input_file}")
    logger.info(f"Output: {output_file}")

    events = read_events(input_file, args.date)
    logger.info(f"Loaded {len(events)} events")

    engine = LayoutEngine(layout_config_from_args(args))
    results = []
    for day, day_events in split_days(events, args.date).items():
        result = engine.calculate_layout(day_events, day=day)
        logger.info(f"{day.isoformat()}: {result.n_clusters} clusters, max {result.max_columns} columns, "
                    f"{result.layout_stats['n_expanded']} widened")
        results.append(result)

    write_layout(results, output_file, fmt=args.format)
