# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binds parsed options to the option definitions of the resolved command.

Behavior of `DefaultOptionsParser`:
- A definition matches a parsed option written as `--{name}` or `-{alias}`.
- Raises `OptionParsingError` when the same option is given by both its name and alias.
- Raises `OptionParsingError` when a required option is not given.
- Raises `OptionParsingError` for options that match no definition, unless
  `ParserConfig.ignore_unknown_options` is set.
- Casts the value through the type caster when the definition's `type_checks` is True,
  or when it is unset and `ParserConfig.apply_type_casting` is True.
"""
from __future__ import annotations

from cliroute.definitions import OptionDefinition
from cliroute.exceptions import OptionParsingError
from cliroute.logger import logger
from cliroute.parser.parser_config import ParserConfig
from cliroute.parser.parser_types import EvaluatedOption, ParsedOption
from cliroute.parser.protocols import TypeCasterProtocol
from cliroute.parser.type_caster import DefaultTypeCaster


class DefaultOptionsParser:
    def __init__(
        self,
        config: ParserConfig | None = None,
        type_caster: TypeCasterProtocol | None = None,
    ) -> None:
        self.config: ParserConfig = config or ParserConfig()
        self.type_caster: TypeCasterProtocol = type_caster or DefaultTypeCaster()

    def parse_options(
        self, definitions: list[OptionDefinition], options: list[ParsedOption]
    ) -> list[EvaluatedOption]:
        """
        Validate the parsed options against `definitions` and bind their values.

        Args:
            definitions (list[OptionDefinition]): Options known to the resolved command.
            options (list[ParsedOption]): Options found by the tokenizer.

        Returns:
            list[EvaluatedOption]: One entry per definition that was given, in
            definition order.

        Raises:
            OptionParsingError: On name/alias reuse, missing required options, or
            unknown options.
            TypeCastingError: When a value does not fit its declared type.
        """
        evaluated: list[EvaluatedOption] = []
        missing = list(definitions)
        found: list[ParsedOption] = []

        for definition in definitions:
            parsed = next(
                (option for option in options if self._matches(definition, option)),
                None,
            )
            if parsed is None:
                continue
            self._no_use_of_alias_and_name(options, definition, parsed)
            evaluated.append(self._parse_option(definition, parsed))
            missing.remove(definition)
            found.append(parsed)

        self._no_missing_options(missing)
        self._no_extra_options(
            [option for option in options if not any(option is f for f in found)]
        )
        return evaluated

    def _matches(self, definition: OptionDefinition, option: ParsedOption) -> bool:
        if definition.alias and option.raw_name == f"-{definition.alias}":
            return True
        return option.raw_name == f"--{definition.name}"

    def _no_use_of_alias_and_name(
        self,
        options: list[ParsedOption],
        definition: OptionDefinition,
        parsed: ParsedOption,
    ) -> None:
        if not definition.alias:
            return
        other = f"--{definition.name}" if parsed.is_alias else f"-{definition.alias}"
        if any(option.raw_name == other for option in options):
            raise OptionParsingError(
                "Invalid options: you cannot provide the same option with both its name "
                f"'--{definition.name}' and its alias '-{definition.alias}'"
            )

    def _no_missing_options(self, remaining: list[OptionDefinition]) -> None:
        missing = [definition for definition in remaining if definition.required]
        if missing:
            listing = "".join(
                f"\n({index})  {definition.usage()}"
                for index, definition in enumerate(missing, start=1)
            )
            raise OptionParsingError(
                "Invalid options: You have not provided the following required options"
                f"{listing}"
            )

    def _no_extra_options(self, unknown: list[ParsedOption]) -> None:
        if unknown and not self.config.ignore_unknown_options:
            raise OptionParsingError(
                "Invalid options: You have provided one or more options that are not "
                f"known in this context: {', '.join(opt.raw_name for opt in unknown)}"
            )
        if unknown:
            logger.debug("Ignoring unknown options: %s", [opt.raw_name for opt in unknown])

    def _parse_option(
        self, definition: OptionDefinition, parsed: ParsedOption
    ) -> EvaluatedOption:
        requires_casting = (
            definition.type_checks
            if definition.type_checks is not None
            else self.config.apply_type_casting
        )
        value = parsed.value
        if requires_casting:
            value = self.type_caster.cast_option(definition, parsed)
        return EvaluatedOption(definition=definition, value=value)
