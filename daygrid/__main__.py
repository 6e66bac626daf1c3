"""
DayGrid CLI

Command-line interface with subcommands for laying out and rendering a day view.
"""

import argparse
import sys
from .cli import layout, plot


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='daygrid',
        description='DayGrid: Overlap-aware day-view calendar layout'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    layout.add_parser(subparsers)
    plot.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    if args.command == 'layout':
        layout.run(args)
    elif args.command == 'plot':
        plot.run(args)


if __name__ == "__main__":
    main()
