"""
lintopts.config - Turning flags and files into a typed configuration.

- coercion: raw value -> typed value per option
- resolved: ResolvedConfig (read-only) and ConfigBuilder
- flags: argparse arguments generated from the catalog
- loader: YAML/JSON options files
"""
from lintopts.config.coercion import coerce_value
from lintopts.config.resolved import ConfigBuilder, ResolvedConfig
from lintopts.config.flags import add_option_arguments, resolve_namespace
from lintopts.config.loader import (
    OptionsFile,
    find_options_file,
    load_options_file,
    parse_options_document,
)

__all__ = [
    "coerce_value",
    "ConfigBuilder",
    "ResolvedConfig",
    "add_option_arguments",
    "resolve_namespace",
    "OptionsFile",
    "find_options_file",
    "load_options_file",
    "parse_options_document",
]
