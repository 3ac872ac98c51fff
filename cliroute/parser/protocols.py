# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for the pluggable parser stages.

A `ParserModule` accepts any object satisfying these runtime-checkable `Protocol`
classes in place of its default implementations, without requiring explicit base
classes.

Protocols:
- ArgumentsParserProtocol: Tokenizes raw arguments into an `ArgumentsContext`.
- OptionsParserProtocol: Binds parsed options to option definitions.
- ParameterParserProtocol: Binds positional values to parameter definitions.
- TypeCasterProtocol: Casts option and parameter values to their declared types.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from cliroute.definitions import OptionDefinition, ParameterDefinition
from cliroute.parser.parser_types import (
    ArgumentsContext,
    EvaluatedOption,
    EvaluatedParameter,
    ParsedOption,
)


@runtime_checkable
class ArgumentsParserProtocol(Protocol):
    def parse(self, raw_args: list[str]) -> ArgumentsContext: ...


@runtime_checkable
class OptionsParserProtocol(Protocol):
    def parse_options(
        self, definitions: list[OptionDefinition], options: list[ParsedOption]
    ) -> list[EvaluatedOption]: ...


@runtime_checkable
class ParameterParserProtocol(Protocol):
    def parse_parameters(
        self, definitions: list[ParameterDefinition], parameters: list[str]
    ) -> list[EvaluatedParameter]: ...


@runtime_checkable
class TypeCasterProtocol(Protocol):
    def cast_option(self, definition: OptionDefinition, parsed: ParsedOption) -> Any: ...

    def cast_parameter(self, definition: ParameterDefinition, value: Any) -> Any: ...
