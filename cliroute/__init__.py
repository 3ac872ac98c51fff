"""
Cliroute CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .app import CliApp, Resolution
from .command import Command
from .definitions import OptionDefinition, OptionsContainer, ParameterDefinition
from .exceptions import (
    BuildError,
    CliRouteError,
    CommandResolutionError,
    MissingCommandError,
    OptionParsingError,
    ParameterParsingError,
    ParsingError,
    TypeCastingError,
    UnknownCommandError,
)
from .group import Group, Route
from .parser import FilePath, Int, ParserConfig, ParserModule
from .tree import CommandTree, ResolvedRoute
from .version import __version__

__all__ = [
    "BuildError",
    "CliApp",
    "CliRouteError",
    "Command",
    "CommandResolutionError",
    "CommandTree",
    "FilePath",
    "Group",
    "Int",
    "MissingCommandError",
    "OptionDefinition",
    "OptionParsingError",
    "OptionsContainer",
    "ParameterDefinition",
    "ParameterParsingError",
    "ParserConfig",
    "ParserModule",
    "ParsingError",
    "Resolution",
    "ResolvedRoute",
    "Route",
    "TypeCastingError",
    "UnknownCommandError",
    "__version__",
]
