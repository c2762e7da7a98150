#!/usr/bin/env python3
"""
Command line interface: find the configuration of an application and print it.

Examples:
    confscout mytool
    confscout mytool --start src/module.py --format json
    confscout mytool --load ./configs/mytool.yaml
"""

import asyncio
import json
import os
import sys
from typing import List, Optional

import yaml

from .engine import Confscout
from .utils.logger import setup_logging

LOG_LEVEL_ENV = 'CONFSCOUT_LOG_LEVEL'


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        prog='confscout',
        description='Find and print the configuration of an application',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('name', help='Application name')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--start', help='File or folder where the search starts (default: current folder)')
    source.add_argument('--load', metavar='FILE', help='Load this configuration file instead of searching')
    parser.add_argument('--stop', help='Last folder searched (default: user home)')
    parser.add_argument('--module-path', action='append', default=[], dest='module_paths',
                        help='Extra folder where modules are searched (repeatable)')
    parser.add_argument('--no-cache', action='store_true', help='Disable caching')
    parser.add_argument('--async', action='store_true', dest='use_async', help='Use non-blocking I/O')
    parser.add_argument('--format', choices=['yaml', 'json'], default='yaml', help='Output format')
    parser.add_argument('--log-level', default=os.environ.get(LOG_LEVEL_ENV, 'WARNING'),
                        help=f'Logging level (environment: {LOG_LEVEL_ENV})')
    parser.add_argument('--log-file', help='Also write logs to this file')
    return parser


def format_configuration(configuration, file_name: str, output_format: str) -> str:
    """Render a configuration for display."""
    if output_format == 'json':
        return json.dumps(configuration, indent=2, default=str)
    dumped = yaml.safe_dump(configuration, default_flow_style=False, sort_keys=False)
    return f"# {file_name}\n{dumped.rstrip()}"


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for command-line usage."""
    args = build_parser().parse_args(argv)

    setup_logging(log_level=args.log_level, log_file=args.log_file)

    finder = Confscout(
        args.name,
        search_stop=args.stop,
        module_paths=args.module_paths,
        cache=not args.no_cache,
        mode='async' if args.use_async else 'sync',
    )

    if args.load:
        call = finder.load(args.load)
    else:
        call = finder.search(args.start)
    result = asyncio.run(call) if args.use_async else call

    if result is None:
        print(f"No configuration found for {args.name}", file=sys.stderr)
        return 1

    print(format_configuration(result.configuration, result.file_name, args.format))
    return 0


if __name__ == '__main__':
    sys.exit(main())
