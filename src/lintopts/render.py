"""
Help and usage text for lint options.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from lintopts.config.resolved import ResolvedConfig
from lintopts.core.options import (
    OptionDescriptor,
    ValueType,
    curated_subset,
    describe,
    list_all,
    lookup,
    maximum_name_length,
)

_TYPE_SUFFIX = {
    ValueType.BOOLEAN: "",
    ValueType.INTEGER: " (integer)",
    ValueType.STRING_LIST: " (list)",
}


def format_option_line(option: OptionDescriptor, width: Optional[int] = None) -> str:
    width = maximum_name_length() if width is None else width
    return f"  --{option.canonical_name.ljust(width)}  {option.description}{_TYPE_SUFFIX[option.value_type]}"


def format_option_table(options: Optional[Iterable[OptionDescriptor]] = None) -> List[str]:
    """One aligned line per option, names padded to the longest catalog name."""
    width = maximum_name_length()
    return [format_option_line(o, width) for o in (list_all() if options is None else options)]


def format_descriptions(options: Optional[Iterable[OptionDescriptor]] = None) -> List[str]:
    return [describe(o) for o in (list_all() if options is None else options)]


def format_good_parts() -> List[str]:
    """Heading plus the recommended options, sorted by name."""
    picks = sorted(curated_subset(), key=lambda o: o.identifier)
    lines = ['The Good Parts (recommended by "JavaScript: The Good Parts"):']
    lines.extend(format_option_table(picks))
    return lines


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, tuple):
        return ",".join(value)
    return str(value)


def format_config(config: ResolvedConfig) -> List[str]:
    """The resolved options as aligned 'name = value' lines, in catalog order."""
    if not config:
        return ["(no options set)"]
    width = maximum_name_length()
    lines = []
    for option in list_all():
        if option.identifier in config:
            lines.append(f"{option.canonical_name.ljust(width)} = {_format_value(config[option])}")
    return lines


def format_option_detail(name: str) -> List[str]:
    """Everything known about one option. Raises UnknownOptionError."""
    option = lookup(name)
    recommended = "yes" if option in curated_subset() else "no"
    return [
        describe(option),
        f"  identifier:  {option.identifier}",
        f"  type:        {option.value_type.value}",
        f"  good parts:  {recommended}",
    ]
