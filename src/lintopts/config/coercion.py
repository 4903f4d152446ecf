"""
Value coercion for lint options.

Turns raw values (command-line text, or native values from an options file)
into the typed value an option declares:

    BOOLEAN      -> bool    (None means the flag was given without a value)
    INTEGER      -> int
    STRING_LIST  -> tuple[str, ...]
"""
from __future__ import annotations

import re
from typing import Any, Tuple

from lintopts.core.errors import TypeMismatchError
from lintopts.core.options import OptionDescriptor, ValueType

TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
FALSE_WORDS = frozenset({"false", "no", "off", "0"})

LIST_DELIMITER = ","

_INTEGER_RX = re.compile(r"[+-]?[0-9]+")


def coerce_boolean(option: OptionDescriptor, raw: Any) -> bool:
    if raw is None:
        return True
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        word = raw.strip().lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
    raise TypeMismatchError(option, raw)


def coerce_integer(option: OptionDescriptor, raw: Any) -> int:
    # bool is an int subclass; "--indent=true" is a mistake, not 1
    if isinstance(raw, bool):
        raise TypeMismatchError(option, raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        # ASCII digits only; int() also takes "1_0" and non-Latin digits
        if not _INTEGER_RX.fullmatch(text):
            raise TypeMismatchError(option, raw, "not a number")
        return int(text, 10)
    raise TypeMismatchError(option, raw)


def coerce_string_list(option: OptionDescriptor, raw: Any) -> Tuple[str, ...]:
    if isinstance(raw, str):
        items = raw.split(LIST_DELIMITER)
    elif isinstance(raw, (list, tuple)):
        if not all(isinstance(item, str) for item in raw):
            raise TypeMismatchError(option, raw, "list items must be names")
        items = raw
    else:
        raise TypeMismatchError(option, raw)
    return tuple(token for token in (item.strip() for item in items) if token)


_COERCERS = {
    ValueType.BOOLEAN: coerce_boolean,
    ValueType.INTEGER: coerce_integer,
    ValueType.STRING_LIST: coerce_string_list,
}


def coerce_value(option: OptionDescriptor, raw: Any) -> Any:
    """
    Coerce a raw value to the option's declared type.

    Args:
        option: The option the value belongs to.
        raw: Text from the command line, a native value from an options
            file, or None for a flag given without a value.

    Returns:
        The typed value.

    Raises:
        TypeMismatchError: If the value cannot be read as the declared type.
    """
    return _COERCERS[option.value_type](option, raw)
