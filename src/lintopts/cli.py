"""
CLI entry point for lintopts.

Usage:
    lintopts list [--raw]                  Show every lint option
    lintopts good-parts                    Show the recommended options
    lintopts show <name>                   Describe a single option
    lintopts resolve [flags...]            Build a configuration from file + flags

Resolve:
    lintopts resolve --config .jslintrc.yaml --good-parts --indent=2 --predef=jQuery
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import (
    ConfigBuilder,
    ResolvedConfig,
    add_option_arguments,
    find_options_file,
    load_options_file,
    resolve_namespace,
)
from .core.errors import LintOptionError, UnknownOptionError
from .render import (
    format_config,
    format_descriptions,
    format_good_parts,
    format_option_detail,
    format_option_table,
)

logger = logging.getLogger(__name__)


def _print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def cmd_list(args):
    """Show every lint option."""
    _print_lines(format_descriptions() if args.raw else format_option_table())
    return 0


def cmd_good_parts(args):
    """Show the options from "The Good Parts"."""
    _print_lines(format_good_parts())
    return 0


def cmd_show(args):
    """Describe a single option."""
    try:
        _print_lines(format_option_detail(args.name))
    except UnknownOptionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_resolve(args):
    """Build a configuration: options file, then good parts, then flags."""
    try:
        config = ResolvedConfig()
        path = args.config or find_options_file()
        if path:
            logger.info("Using options file %s", path)
            config = load_options_file(path)
        if args.good_parts:
            config = config.merged(ConfigBuilder().enable_good_parts().build())
        config = config.merged(resolve_namespace(args).build())
    except (LintOptionError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(config.to_engine_options(), indent=2, sort_keys=True))
    else:
        _print_lines(format_config(config))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lintopts",
        description="JSLint option catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lintopts list
    lintopts show maxlen
    lintopts resolve --good-parts --indent=4 --predef=jQuery,window --json
"""
    )
    parser.add_argument('--version', action='version', version=f'lintopts {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # list
    list_p = subparsers.add_parser('list', help='List all lint options')
    list_p.add_argument('--raw', action='store_true', help='Print name[description] strings')
    list_p.set_defaults(func=cmd_list)

    # good-parts
    good_p = subparsers.add_parser('good-parts', help='Show the recommended options')
    good_p.set_defaults(func=cmd_good_parts)

    # show
    show_p = subparsers.add_parser('show', help='Describe one option')
    show_p.add_argument('name', help='Option name (case-insensitive)')
    show_p.set_defaults(func=cmd_show)

    # resolve
    # exact option names only, no argparse prefix matching
    resolve_p = subparsers.add_parser('resolve', help='Resolve a configuration', allow_abbrev=False)
    resolve_p.add_argument('-c', '--config', help='Options file (default: search for .jslintrc.*)')
    resolve_p.add_argument('--good-parts', action='store_true', help='Enable the recommended options')
    resolve_p.add_argument('--json', action='store_true', help='Print engine options as JSON')
    add_option_arguments(resolve_p)
    resolve_p.set_defaults(func=cmd_resolve)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
