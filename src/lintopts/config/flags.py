"""
Command-line flags generated from the option catalog.

Every option becomes a --<name> argument:

    --white                 boolean, no value means true
    --white=false           boolean, explicit value
    --indent=4              integer, value required
    --predef=a,b --predef c string list, repeatable and comma-delimited

argparse only collects the raw text; typing goes through ConfigBuilder so
flags and options files share one set of coercion rules.
"""
from __future__ import annotations

import argparse
from typing import Optional

from lintopts.config.resolved import ConfigBuilder
from lintopts.core.options import OptionDescriptor, ValueType, list_all

DEST_PREFIX = "opt_"

_METAVARS = {
    ValueType.BOOLEAN: "BOOL",
    ValueType.INTEGER: "N",
    ValueType.STRING_LIST: "NAMES",
}


def dest_for(option: OptionDescriptor) -> str:
    """Namespace attribute that holds the raw values for an option."""
    return DEST_PREFIX + option.canonical_name


def add_option_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """
    Add one --<name> argument per catalog option to parser.

    Build parser with allow_abbrev=False so only exact option names match.
    """
    group = parser.add_argument_group("lint options")
    for option in list_all():
        kwargs = dict(
            dest=dest_for(option),
            action="append",
            default=None,
            metavar=_METAVARS[option.value_type],
            help=option.description,
        )
        if option.value_type is ValueType.BOOLEAN:
            kwargs.update(nargs="?", const=None)
        group.add_argument(f"--{option.canonical_name}", **kwargs)
    return parser


def resolve_namespace(
    namespace: argparse.Namespace,
    builder: Optional[ConfigBuilder] = None,
) -> ConfigBuilder:
    """
    Feed the option flags found in namespace into a builder.

    Options that were not given on the command line are left unset.

    Raises:
        TypeMismatchError: If a flag value cannot be coerced.
    """
    builder = builder or ConfigBuilder()
    for option in list_all():
        raw_values = getattr(namespace, dest_for(option), None)
        if raw_values is None:
            continue
        for raw in raw_values:
            builder.set(option.identifier, raw)
    return builder
