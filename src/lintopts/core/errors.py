"""
Exception taxonomy for lint option handling.

All errors derive from LintOptionError so callers (the CLI in particular)
can catch one type and turn it into a user-facing message.
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from lintopts.core.options import OptionDescriptor


class LintOptionError(Exception):
    """Base class for option catalog and configuration errors."""


class UnknownOptionError(LintOptionError):
    """Raised when a name matches no option in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown option: {name}")


class TypeMismatchError(LintOptionError):
    """Raised when a value cannot be coerced to an option's declared type."""

    def __init__(self, option: OptionDescriptor, value: Any, reason: str = ""):
        self.option = option
        self.value = value
        msg = f"Option '{option.canonical_name}' expects {option.value_type.label}, got {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class OptionsFileError(LintOptionError):
    """Raised when an options file is structurally invalid."""

    def __init__(self, path: Optional[Path], message: str):
        self.path = path
        where = str(path) if path else "<options>"
        super().__init__(f"{where}: {message}")
