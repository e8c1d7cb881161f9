"""Exceptions raised while populating an option set."""

from __future__ import annotations

from typing import Any


class OptionError(ValueError):
    """Base class for option schema errors."""


class UnknownOptionError(OptionError):
    """Raised when an option name is not part of the command's schema."""

    def __init__(self, name: str, schema: str) -> None:
        super().__init__(f"Unknown option {name!r} for {schema}")
        self.name = name
        self.schema = schema


class OptionTypeError(OptionError, TypeError):
    """Raised when a value does not match the kind of its option slot."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Invalid value {value!r} for option {name!r}: {reason}"
        )
        self.name = name
        self.value = value
        self.reason = reason
