"""
lintopts - JSLint option catalog

The fixed set of options that tune a JSLint engine, plus the tooling that
turns command-line flags and options files into a typed configuration.
"""

__version__ = "0.1.0"
__author__ = "lintopts contributors"

from lintopts.core import (
    OptionDescriptor,
    ValueType,
    UnknownOptionError,
    TypeMismatchError,
    curated_subset,
    describe,
    list_all,
    lookup,
    maximum_name_length,
)
from lintopts.config import ConfigBuilder, ResolvedConfig, load_options_file
