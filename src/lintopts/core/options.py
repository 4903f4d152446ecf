"""
JSLint Option Catalog - Single Source of Truth for Lint Options.

Every option that can tune the behaviour of the JSLint engine is declared
here exactly once, together with a description and the type of value it
accepts. The catalog is built on import and never changes afterwards.

Rules:
    - Identifiers are uppercase ASCII tokens and must be unique
    - Never change the value type of an existing option
    - Callers branch on identifier or value_type, NEVER on description text
    - The catalog declares types; coercion lives in lintopts.config.coercion
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Tuple

from lintopts.core.errors import UnknownOptionError


class ValueType(Enum):
    """The kind of value an option accepts."""

    BOOLEAN = "boolean"        # Flag, absent value means true
    INTEGER = "integer"        # Numeric threshold
    STRING_LIST = "list"       # Ordered identifier tokens (e.g. predefined globals)

    @property
    def label(self) -> str:
        return {
            ValueType.BOOLEAN: "a boolean",
            ValueType.INTEGER: "an integer",
            ValueType.STRING_LIST: "a list of names",
        }[self]


@dataclass(frozen=True)
class OptionDescriptor:
    """Definition of one lint option in the catalog."""
    identifier: str
    description: str
    value_type: ValueType = ValueType.BOOLEAN

    @property
    def canonical_name(self) -> str:
        """Lowercase name, e.g. 'white'. Identifiers are ASCII, so this is locale-free."""
        return self.identifier.lower()

    def __str__(self) -> str:
        return describe(self)


# =============================================================================
# Catalog Definition
# =============================================================================

_OPTION_LIST: List[OptionDescriptor] = [
    OptionDescriptor("ADSAFE", "If adsafe rules should be enforced"),
    OptionDescriptor("BITWISE", "If bitwise operators should not be allowed"),
    OptionDescriptor("BROWSER", "If the standard browser globals should be predefined"),
    OptionDescriptor("CAP", "If upper case html should be allowed"),
    OptionDescriptor("CONTINUE", "If the continuation statement should be tolerated"),
    OptionDescriptor("CSS", "If css workarounds should be tolerated"),
    OptionDescriptor("DEBUG", "If debugger statements should be allowed"),
    OptionDescriptor("DEVEL", "If logging should be allowed (console, alert, etc.)"),
    OptionDescriptor("ES5", "If es5 syntax should be allowed"),
    OptionDescriptor("EVIL", "If eval should be allowed"),
    OptionDescriptor("FORIN", "If for in statements need not filter"),
    OptionDescriptor("FRAGMENT", "If html fragments should be allowed"),

    # Numeric thresholds
    OptionDescriptor("INDENT", "The indentation factor", ValueType.INTEGER),
    OptionDescriptor("MAXERR", "The maximum number of errors to allow", ValueType.INTEGER),
    OptionDescriptor("MAXLEN", "The maximum length of a source line", ValueType.INTEGER),

    OptionDescriptor("NEWCAP", "If constructor names must be capitalized"),
    OptionDescriptor("NOMEN", "If names should be checked"),
    OptionDescriptor("ON", "If html event handlers should be allowed"),
    OptionDescriptor("ONEVAR", "If only one var statement per function should be allowed"),
    OptionDescriptor("PASSFAIL", "If the scan should stop on first error"),
    OptionDescriptor("PLUSPLUS", "If increment/decrement should not be allowed"),

    # Token list
    OptionDescriptor("PREDEF", "The names of predefined global variables", ValueType.STRING_LIST),

    OptionDescriptor("REGEXP", "If the . should not be allowed in regexp literals"),
    OptionDescriptor("RHINO", "If the rhino environment globals should be predefined"),
    OptionDescriptor("SAFE", "If use of some browser features should be restricted"),
    OptionDescriptor("STRICT", 'Require the "use strict"; pragma'),
    OptionDescriptor("SUB", "If all forms of subscript notation are tolerated"),
    OptionDescriptor("UNDEF", "If variables should be declared before used"),
    OptionDescriptor("WHITE", "If strict whitespace rules apply"),
    OptionDescriptor("WIDGET", "If the yahoo widgets globals should be predefined"),
    OptionDescriptor("WINDOWS", "If ms windows-specigic globals should be predefined"),
]

# The options from "JavaScript: The Good Parts", as recommended on jslint.com.
_GOOD_PARTS_IDS: Tuple[str, ...] = (
    "WHITE", "ONEVAR", "UNDEF", "NEWCAP", "NOMEN", "REGEXP", "PLUSPLUS", "BITWISE",
)

_IDENTIFIER_RX = re.compile(r"^[A-Z][A-Z0-9_]*$")


def _build_catalog(
    entries: List[OptionDescriptor],
) -> Tuple[Tuple[OptionDescriptor, ...], Mapping[str, OptionDescriptor], int]:
    """Build the ordered table and index from the list, validating uniqueness."""
    index: Dict[str, OptionDescriptor] = {}
    max_len = 0

    for entry in entries:
        if not _IDENTIFIER_RX.match(entry.identifier):
            raise ValueError(f"Invalid option identifier: {entry.identifier!r} (expected uppercase ASCII)")
        if entry.identifier in index:
            raise ValueError(f"Duplicate option in catalog: {entry.identifier}")
        index[entry.identifier] = entry
        max_len = max(max_len, len(entry.identifier))

    return tuple(entries), MappingProxyType(index), max_len


def _build_good_parts(index: Mapping[str, OptionDescriptor]) -> FrozenSet[OptionDescriptor]:
    missing = [ident for ident in _GOOD_PARTS_IDS if ident not in index]
    if missing:
        raise ValueError(f"Good parts reference unknown options: {', '.join(missing)}")
    return frozenset(index[ident] for ident in _GOOD_PARTS_IDS)


# Build catalog on import
OPTIONS, CATALOG, _MAX_NAME_LENGTH = _build_catalog(_OPTION_LIST)
GOOD_PARTS = _build_good_parts(CATALOG)


# =============================================================================
# Queries
# =============================================================================

def list_all() -> Tuple[OptionDescriptor, ...]:
    """All options, in declaration order."""
    return OPTIONS


def lookup(name: str) -> OptionDescriptor:
    """
    Find an option by name, ignoring case.

    Only ASCII input is upper-cased, so the result never depends on the
    host locale or on Unicode case folding ("ı".upper() == "I").

    Raises:
        UnknownOptionError: If no option has this identifier.
    """
    if isinstance(name, OptionDescriptor):
        return name
    if not isinstance(name, str):
        raise UnknownOptionError(str(name))
    key = name.upper() if name.isascii() else None
    entry = CATALOG.get(key) if key else None
    if entry is None:
        raise UnknownOptionError(name)
    return entry


def is_known(name: str) -> bool:
    """True if lookup(name) would succeed."""
    try:
        lookup(name)
    except UnknownOptionError:
        return False
    return True


def maximum_name_length() -> int:
    """Length of the longest identifier, for aligned display."""
    return _MAX_NAME_LENGTH


def curated_subset() -> FrozenSet[OptionDescriptor]:
    """The set of options from "JavaScript: The Good Parts"."""
    return GOOD_PARTS


def describe(option: OptionDescriptor) -> str:
    """Show this option and its description, e.g. 'white[If strict whitespace rules apply]'."""
    return f"{option.canonical_name}[{option.description}]"
