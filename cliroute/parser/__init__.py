"""
Cliroute CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arguments_parser import DefaultArgumentsParser
from .options_parser import DefaultOptionsParser
from .options_validator import OptionsValidator
from .parameter_parser import DefaultParameterParser
from .parameter_validator import ParametersValidator
from .parser_config import ParserConfig
from .parser_module import ParserModule
from .parser_types import (
    ArgumentsContext,
    EvaluatedArgumentsContext,
    EvaluatedOption,
    EvaluatedParameter,
    FilePath,
    Int,
    ParsedOption,
)
from .type_caster import DefaultTypeCaster

__all__ = [
    "ArgumentsContext",
    "DefaultArgumentsParser",
    "DefaultOptionsParser",
    "DefaultParameterParser",
    "DefaultTypeCaster",
    "EvaluatedArgumentsContext",
    "EvaluatedOption",
    "EvaluatedParameter",
    "FilePath",
    "Int",
    "OptionsValidator",
    "ParametersValidator",
    "ParsedOption",
    "ParserConfig",
    "ParserModule",
]
