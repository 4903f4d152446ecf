"""
lintopts.core - The option catalog and its error types.

- options: OptionDescriptor, ValueType and the immutable catalog queries
- errors: UnknownOptionError, TypeMismatchError, OptionsFileError
"""
from lintopts.core.errors import (
    LintOptionError,
    OptionsFileError,
    TypeMismatchError,
    UnknownOptionError,
)
from lintopts.core.options import (
    CATALOG,
    GOOD_PARTS,
    OptionDescriptor,
    ValueType,
    curated_subset,
    describe,
    is_known,
    list_all,
    lookup,
    maximum_name_length,
)

__all__ = [
    "CATALOG",
    "GOOD_PARTS",
    "OptionDescriptor",
    "ValueType",
    "curated_subset",
    "describe",
    "is_known",
    "list_all",
    "lookup",
    "maximum_name_length",
    "LintOptionError",
    "OptionsFileError",
    "TypeMismatchError",
    "UnknownOptionError",
]
