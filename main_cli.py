#!/usr/bin/env python3
"""
Main CLI Entry Point
Looks up German words on duden.de from the terminal

Usage:
  duden search <term> [--no-pager] [-v]
  python main_cli.py search <term>
"""

import argparse
import logging
import sys
from functools import partial

from core.config import LookupConfig, get_config
from core.errors import DudenError
from core.search_session import SearchSession
from fetchers.duden_client import DudenClient
from utils.display import setup_console, show


def configure_logging(config: LookupConfig, verbosity: int = 0):
    """Log to stderr so messages never mix with the definition on stdout"""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, config.log_level)
    logging.basicConfig(level=level, format=config.log_format, stream=sys.stderr)
    # urllib3 connection chatter is only interesting at -vv
    logging.getLogger('urllib3').setLevel(logging.DEBUG if verbosity >= 2 else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='duden', description='Duden online dictionary lookup')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='More log output on stderr (-vv for debug)')
    subcommands = parser.add_subparsers(dest='command', metavar='COMMAND')

    search = subcommands.add_parser('search', help='Search a word and show its definition')
    search.add_argument('term', help='Word to look up')
    search.add_argument('--no-pager', action='store_true',
                        help='Print the definition instead of opening a pager')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = get_config()
    except (ValueError, OSError) as e:
        print(f"[ERROR] Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(config, args.verbose)
    setup_console()

    display = partial(
        show,
        use_pager=config.use_pager and not args.no_pager,
        pager=config.pager,
    )
    session = SearchSession(DudenClient(config), display=display)

    try:
        result = session.run(args.term)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    except DudenError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
