# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the cliroute framework.

Errors come in two tiers. Build errors describe a broken command tree or
broken option/parameter metadata and should abort startup. Everything else is
triggered by the tokens of a single invocation and is expected to be caught by
the host and shown to the user.

All exceptions inherit from `CliRouteError`, the base exception for the framework.

Exception Hierarchy:
- CliRouteError
    ├── BuildError
    ├── CommandResolutionError
    │     ├── UnknownCommandError
    │     └── MissingCommandError
    └── ParsingError
          ├── OptionParsingError
          ├── ParameterParsingError
          └── TypeCastingError
"""
from __future__ import annotations

from typing import Any


class CliRouteError(Exception):
    """Base exception for the cliroute framework."""


class BuildError(CliRouteError):
    """Exception raised when the command tree or its metadata is invalid."""


class CommandResolutionError(CliRouteError):
    """Exception raised when the invocation does not resolve to a command."""


class UnknownCommandError(CommandResolutionError):
    """Exception raised when a token does not match any command in the current group."""


class MissingCommandError(CommandResolutionError):
    """Exception raised when a command was expected but none was given."""


class ParsingError(CliRouteError):
    """Base exception for errors caused by the tokens of one invocation."""


class OptionParsingError(ParsingError):
    """Exception raised when parsed options do not match the option metadata."""


class ParameterParsingError(ParsingError):
    """Exception raised when positional values do not match the parameter metadata."""


class TypeCastingError(ParsingError):
    """
    Exception raised when a value cannot be cast to its declared type.

    Attributes:
        target (str | None): Name of the offending option or parameter, once known.
        is_option (bool): True when the value belongs to an option.
        value (Any): The raw value that failed to cast.
    """

    def __init__(
        self,
        message: str,
        *,
        target: str | None = None,
        is_option: bool = False,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.target = target
        self.is_option = is_option
        self.value = value
