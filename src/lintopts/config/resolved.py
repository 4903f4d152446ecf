"""
Resolved lint configuration.

A ResolvedConfig maps option identifiers to typed values and holds only the
options that were explicitly set. It is what the lint engine consumes.
ConfigBuilder is the mutable side used while reading flags and files.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional, Union

from lintopts.config.coercion import coerce_value
from lintopts.core.errors import UnknownOptionError
from lintopts.core.options import OptionDescriptor, ValueType, curated_subset, lookup

logger = logging.getLogger(__name__)

OptionKey = Union[str, OptionDescriptor]


class ResolvedConfig(Mapping):
    """
    Read-only mapping of identifier -> typed value.

    Keys given to the constructor may use any case of an option name and are
    stored by identifier; values are coerced to the option's declared type.

    Raises:
        UnknownOptionError: If a key is not a known option.
        TypeMismatchError: If a value does not match its option's type.
    """

    def __init__(self, values: Optional[Mapping] = None):
        typed: Dict[str, Any] = {}
        for name, raw in (values or {}).items():
            option = lookup(name)
            typed[option.identifier] = coerce_value(option, raw)
        self._values: Mapping[str, Any] = MappingProxyType(typed)

    def __getitem__(self, key: OptionKey) -> Any:
        try:
            ident = lookup(key).identifier
        except UnknownOptionError:
            raise KeyError(key) from None
        return self._values[ident]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, OptionDescriptor)):
            return False
        try:
            return lookup(key).identifier in self._values
        except UnknownOptionError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ResolvedConfig({dict(self._values)!r})"

    def merged(self, other: "ResolvedConfig") -> "ResolvedConfig":
        """Return a new config where entries in other win."""
        values = dict(self._values)
        values.update(other._values)
        return ResolvedConfig(values)

    def to_engine_options(self) -> Dict[str, Any]:
        """
        The options object handed to the JSLint engine.

        Keys are canonical (lowercase) names; string lists become lists.
        """
        result: Dict[str, Any] = {}
        for ident, value in self._values.items():
            option = lookup(ident)
            if option.value_type is ValueType.STRING_LIST:
                value = list(value)
            result[option.canonical_name] = value
        return result


class ConfigBuilder:
    """Accumulates option values, coercing each one as it is set."""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def set(self, name: OptionKey, raw: Any = None) -> OptionDescriptor:
        """
        Look up an option and store its coerced value.

        String lists accumulate across calls (repeated flags); every other
        type is last-one-wins.

        Raises:
            UnknownOptionError: If name is not a known option.
            TypeMismatchError: If raw cannot be coerced.
        """
        option = lookup(name)
        value = coerce_value(option, raw)
        if option.value_type is ValueType.STRING_LIST and option.identifier in self._values:
            value = self._values[option.identifier] + value
        self._values[option.identifier] = value
        logger.debug("Set option %s = %r", option.canonical_name, value)
        return option

    def update(self, values: Mapping) -> "ConfigBuilder":
        for name, raw in values.items():
            self.set(name, raw)
        return self

    def enable_good_parts(self) -> "ConfigBuilder":
        """Turn on every option from "The Good Parts"."""
        for option in curated_subset():
            self._values[option.identifier] = True
        return self

    def build(self) -> ResolvedConfig:
        return ResolvedConfig(self._values)
