# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binds positional values to the parameter definitions of the resolved command.

Behavior of `DefaultParameterParser`:
- Values are bound by position against the definitions sorted by index.
- An array parameter takes every remaining value as one list.
- Raises `ParameterParsingError` when a required parameter has no value.
- Raises `ParameterParsingError` for leftover values, unless
  `ParserConfig.ignore_unknown_parameters` is set.
- Casts values through the type caster when the definition's `type_checks` is True,
  or when it is unset and `ParserConfig.apply_type_casting` is True.
"""
from __future__ import annotations

from typing import Any

from cliroute.definitions import ParameterDefinition
from cliroute.exceptions import ParameterParsingError
from cliroute.logger import logger
from cliroute.parser.parser_config import ParserConfig
from cliroute.parser.parser_types import EvaluatedParameter
from cliroute.parser.protocols import TypeCasterProtocol
from cliroute.parser.type_caster import DefaultTypeCaster


class DefaultParameterParser:
    def __init__(
        self,
        config: ParserConfig | None = None,
        type_caster: TypeCasterProtocol | None = None,
    ) -> None:
        self.config: ParserConfig = config or ParserConfig()
        self.type_caster: TypeCasterProtocol = type_caster or DefaultTypeCaster()

    def parse_parameters(
        self, definitions: list[ParameterDefinition], parameters: list[str]
    ) -> list[EvaluatedParameter]:
        """
        Bind positional values to `definitions`.

        Args:
            definitions (list[ParameterDefinition]): Parameters of the resolved command.
            parameters (list[str]): Values left after commands and options were taken.

        Returns:
            list[EvaluatedParameter]: Bound parameters in index order.

        Raises:
            ParameterParsingError: On missing required parameters or leftover values.
            TypeCastingError: When a value does not fit its declared type.
        """
        ordered = sorted(definitions, key=lambda definition: definition.index)
        evaluated: list[EvaluatedParameter] = []
        consumed = 0

        for position, value in enumerate(parameters):
            if position >= len(ordered):
                break
            definition = ordered[position]
            if definition.is_array:
                evaluated.append(self._parse_parameter(definition, parameters[position:]))
                consumed = len(parameters)
                break
            evaluated.append(self._parse_parameter(definition, value))
            consumed += 1

        missing = [d for d in ordered[len(evaluated) :] if not d.optional]
        if missing:
            raise ParameterParsingError(
                f"Missing parameters: {', '.join(d.name for d in missing)}"
            )

        remaining = parameters[consumed:]
        if remaining and not self.config.ignore_unknown_parameters:
            raise ParameterParsingError(f"Unknown parameters: {', '.join(remaining)}")
        if remaining:
            logger.debug("Ignoring unknown parameters: %s", remaining)
        return evaluated

    def _parse_parameter(
        self, definition: ParameterDefinition, value: Any
    ) -> EvaluatedParameter:
        requires_casting = (
            definition.type_checks
            if definition.type_checks is not None
            else self.config.apply_type_casting
        )
        if requires_casting:
            value = self.type_caster.cast_parameter(definition, value)
        return EvaluatedParameter(definition=definition, value=value)
