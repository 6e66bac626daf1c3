"""Plot subcommand - day-view rendering"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction
import matplotlib.pyplot as plt

from . import add_layout_arguments, configure_logging, layout_config_from_args, split_days
from ..config import PlotConfig
from ..io import read_events
from ..visualizer import DayViewPlotter

logger = logging.getLogger(__name__)


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
        help='Render a day view image'
    )

    add_layout_arguments(parser)

    parser.add_argument('-o', '--output', required=True,
                       help='Output image file (.png); several days are written as <stem>.<YYYY-MM-DD>.png')
    parser.add_argument('--end-hour', type=int, default=21,
                       help='Hour at which the grid ends (default: 21)')
    parser.add_argument('--column-width', type=float, default=480.0,
                       help='Day column width in pixels (default: 480)')
    parser.add_argument('--title', help='Plot title (default: the day)')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(getattr(args, "debug", False))

    input_file = Path(args.input)
    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}")

    logger.info(f"Input: {input_file}")
    logger.info(f"Output: {args.output}")

    events = read_events(input_file, args.date)
    logger.info(f"Loaded {len(events)} events")

    config = PlotConfig(layout=layout_config_from_args(args))
    config.grid_end_hour = args.end_hour
    config.column_width_px = args.column_width

    output = Path(args.output)
    days = split_days(events, args.date) or {None: []}
    plotter = DayViewPlotter(config)

    for day, day_events in days.items():
        target = output if len(days) == 1 else output.with_name(f"{output.stem}.{day.isoformat()}{output.suffix}")
        fig = plotter.plot(day_events, output_file=str(target), day=day, title=args.title)
        plt.close(fig)
        logger.info(f"✓ Plot saved: {target}")
