"""Shared helpers for DayGrid subcommands"""

from __future__ import annotations
from datetime import date
from typing import Dict, List, Optional, Sequence
import logging
from argparse import ArgumentParser, Namespace

from ..config import LayoutConfig
from ..layout import Event
from ..utils import group_by_day


def add_layout_arguments(parser: ArgumentParser) -> None:
    """
    Add input and layout arguments common to all subcommands

    Args:
        parser: Subcommand parser to extend
    """
    parser.add_argument('-i', '--input', required=True,
                       help='Appointment table (CSV, or TSV with .tsv extension) with id, start, end columns')
    parser.add_argument('--date', type=date.fromisoformat,
                       help='Only lay out events starting on this day (YYYY-MM-DD)')
    parser.add_argument('--start-hour', type=int, default=7,
                       help='Hour mapped to the top of the grid (default: 7)')
    parser.add_argument('--pixels-per-hour', type=float, default=80.0,
                       help='Vertical scale in pixels per hour (default: 80)')
    parser.add_argument('--min-height', type=float, default=20.0,
                       help='Minimum block height in pixels (default: 20)')
    parser.add_argument('--no-expand', action='store_true',
                       help='Disable widening blocks into free columns')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def layout_config_from_args(args: Namespace) -> LayoutConfig:
    """Build a LayoutConfig from parsed arguments"""
    return LayoutConfig(
        day_start_hour=args.start_hour,
        pixels_per_hour=args.pixels_per_hour,
        min_height_px=args.min_height,
        expand_width=not args.no_expand,
    )


def split_days(events: Sequence[Event], day: Optional[date]) -> Dict[date, List[Event]]:
    """
    Per-day event lists for a subcommand run

    The engine lays out one day column at a time, so a table spanning
    several days is split by the calendar day of each start.

    Args:
        events: Events read from the input table
        day: Day selected with --date, if any

    Returns:
        Mapping of day to its events, in day order
    """
    if day is not None:
        return {day: list(events)}
    return group_by_day(events)


def configure_logging(debug: Optional[bool]) -> None:
    """
    Configure logging for a subcommand run

    Args:
        debug: Log at DEBUG instead of INFO
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
