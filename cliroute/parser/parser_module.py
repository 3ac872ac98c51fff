# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The `ParserModule` ties the parser stages together.

At build time `validate()` runs the option and parameter validators over every command
of a `CommandTree`. Per invocation, `evaluate_context()` is called once per level of
the tree: the first call tokenizes the raw arguments, and every call matches the next
possible command against the routes of the current group. Once a command is reached,
`evaluate_options()` and `evaluate_parameters()` bind its values.

Each stage can be replaced by any object satisfying its protocol:

    parser = ParserModule(
        config=ParserConfig(ignore_unknown_options=True),
        type_caster=MyTypeCaster(),
    )
"""
from __future__ import annotations

from typing import Any

from cliroute.definitions import ParameterDefinition
from cliroute.exceptions import BuildError
from cliroute.group import Route
from cliroute.logger import logger
from cliroute.parser.arguments_parser import DefaultArgumentsParser
from cliroute.parser.options_parser import DefaultOptionsParser
from cliroute.parser.options_validator import OptionsValidator
from cliroute.parser.parameter_parser import DefaultParameterParser
from cliroute.parser.parameter_validator import ParametersValidator
from cliroute.parser.parser_config import ParserConfig
from cliroute.parser.parser_types import (
    ArgumentsContext,
    EvaluatedArgumentsContext,
    EvaluatedOption,
    EvaluatedParameter,
    ParsedOption,
)
from cliroute.parser.protocols import (
    ArgumentsParserProtocol,
    OptionsParserProtocol,
    ParameterParserProtocol,
    TypeCasterProtocol,
)
from cliroute.parser.type_caster import DefaultTypeCaster
from cliroute.tree import CommandTree, ResolvedRoute


def _check_protocol(name: str, implementation: Any, protocol: type) -> None:
    if not isinstance(implementation, protocol):
        raise BuildError(
            f"Invalid parser configuration: {name} must implement {protocol.__name__}, "
            f"got {type(implementation).__name__}"
        )


class ParserModule:
    """
    Resolves routes and binds values using pluggable parser stages.

    Args:
        config (ParserConfig | None): Configuration for the default stages.
        arguments (ArgumentsParserProtocol | None): Tokenizer.
        options (OptionsParserProtocol | None): Option binder.
        parameters (ParameterParserProtocol | None): Parameter binder.
        type_caster (TypeCasterProtocol | None): Caster shared by the default binders.
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        *,
        arguments: ArgumentsParserProtocol | None = None,
        options: OptionsParserProtocol | None = None,
        parameters: ParameterParserProtocol | None = None,
        type_caster: TypeCasterProtocol | None = None,
    ) -> None:
        self.config: ParserConfig = config or ParserConfig()
        self.type_caster: TypeCasterProtocol = type_caster or DefaultTypeCaster()
        self.arguments_parser: ArgumentsParserProtocol = (
            arguments or DefaultArgumentsParser(self.config)
        )
        self.options_parser: OptionsParserProtocol = options or DefaultOptionsParser(
            self.config, self.type_caster
        )
        self.parameter_parser: ParameterParserProtocol = (
            parameters or DefaultParameterParser(self.config, self.type_caster)
        )
        _check_protocol("type_caster", self.type_caster, TypeCasterProtocol)
        _check_protocol("arguments", self.arguments_parser, ArgumentsParserProtocol)
        _check_protocol("options", self.options_parser, OptionsParserProtocol)
        _check_protocol("parameters", self.parameter_parser, ParameterParserProtocol)
        self.options_validator = OptionsValidator()
        self.parameters_validator = ParametersValidator()

    def validate(self, tree: CommandTree) -> None:
        """
        Validate the option and parameter metadata of every command in `tree`.

        Raises:
            BuildError: On the first invalid command.
        """
        for resolved in tree.commands():
            command = resolved.command
            if command is None:
                raise BuildError(f"Route '{resolved.id}' does not lead to a command")
            self.options_validator.validate(resolved.mapped_options())
            self.parameters_validator.validate(command.parameters, resolved.id)
            logger.debug("Validated metadata for '%s'", resolved.id)

    def evaluate_context(
        self,
        raw_args_or_context: list[str] | ArgumentsContext,
        routes: list[Route],
    ) -> EvaluatedArgumentsContext:
        """
        Match the next possible command against `routes`.

        On the first call pass the raw arguments; they are tokenized once, with empty
        tokens dropped. On later calls pass the context returned by the previous call.
        A matched command name is removed from the front of both the possible commands
        and the possible parameters. When nothing matches, the star route of `routes`
        is returned if there is one; otherwise `route` is None.
        """
        if isinstance(raw_args_or_context, list):
            context = self.arguments_parser.parse(
                [arg for arg in raw_args_or_context if arg]
            )
        else:
            context = raw_args_or_context

        possible_commands = list(context.possible_commands)
        possible_parameters = list(context.possible_parameters)
        route: Route | None = None
        if possible_commands:
            token = possible_commands[0]
            route = next((r for r in routes if r.matches(token)), None)
            if route:
                logger.debug("Matched '%s' to route '%s'", token, route.path)
                possible_commands = possible_commands[1:]
                possible_parameters = possible_parameters[1:]
        if route is None:
            route = next((r for r in routes if r.is_star), None)
            if route:
                logger.debug("Falling back to the star route")

        return EvaluatedArgumentsContext(
            options=context.options,
            possible_commands=possible_commands,
            possible_parameters=possible_parameters,
            route=route,
        )

    def evaluate_options(
        self, resolved: ResolvedRoute, options: list[ParsedOption]
    ) -> list[EvaluatedOption]:
        """Bind `options` against every option definition in scope for `resolved`."""
        return self.options_parser.parse_options(resolved.option_definitions(), options)

    def evaluate_parameters(
        self, definitions: list[ParameterDefinition], parameters: list[str]
    ) -> list[EvaluatedParameter]:
        return self.parameter_parser.parse_parameters(definitions, parameters)
