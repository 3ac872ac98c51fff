# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tokenizes raw command-line arguments into an `ArgumentsContext`.

Behavior of `DefaultArgumentsParser`:
- Every token starting with `-` is an option. `--name` is a named option, `-n` an alias.
- A single dash token with more than one character is a cluster of short flags:
  `-abc` is read as `-a -b -c`, and only the last flag (`-c`) may take a value.
- `--name=value` and `-n=value` carry their value inline.
- Otherwise the next token is taken as the value when it does not start with `-`;
  an option with no value is a flag with the value True.
- Repeating an option collects its values into a list, in the order given:
  `-v a -v b -v c` gives `['a', 'b', 'c']`.
- Tokens that are neither options nor option values are possible parameters.
- Possible commands are the possible parameters found before the first option,
  or all of them when `ParserConfig.allow_commands_after_options` is set.
"""
from __future__ import annotations

from typing import Any

from cliroute.logger import logger
from cliroute.parser.parser_config import ParserConfig
from cliroute.parser.parser_types import ArgumentsContext, ParsedOption


class DefaultArgumentsParser:
    """Single left-to-right pass over the raw arguments. Never raises."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config: ParserConfig = config or ParserConfig()

    def parse(self, raw_args: list[str]) -> ArgumentsContext:
        """
        Split raw arguments into options, possible commands and possible parameters.

        Args:
            raw_args (list[str]): The invocation arguments, without the program name.

        Returns:
            ArgumentsContext: The parsed options and the candidate token lists.
        """
        options: list[ParsedOption] = []
        used_indices: set[int] = set()
        first_option_index = -1

        for index, arg in enumerate(raw_args):
            if index in used_indices or not arg.startswith("-"):
                continue
            if first_option_index == -1:
                first_option_index = index
            used_indices.add(index)

            is_alias = not arg.startswith("--")
            if is_alias:
                arg = self._expand_flag_cluster(arg, options)

            value: Any
            if "=" in arg:
                arg, _, value = arg.partition("=")
            elif index + 1 < len(raw_args) and not raw_args[index + 1].startswith("-"):
                value = raw_args[index + 1]
                used_indices.add(index + 1)
            else:
                value = True

            self._add_option(arg, value, is_alias, options)

        remaining_args = [
            arg for index, arg in enumerate(raw_args) if index not in used_indices
        ]
        context = ArgumentsContext(
            options=options,
            possible_commands=self._get_possible_commands(
                first_option_index, remaining_args
            ),
            possible_parameters=remaining_args,
        )
        logger.debug(
            "Tokenized %s into options=%s commands=%s parameters=%s",
            raw_args,
            [option.raw_name for option in options],
            context.possible_commands,
            context.possible_parameters,
        )
        return context

    def _expand_flag_cluster(self, arg: str, options: list[ParsedOption]) -> str:
        """Register every flag of `-abc` but the last and return the last as `-c`."""
        flags = arg.split("=", 1)[0]
        if len(flags) <= 2:
            return arg
        for char in flags[1:-1]:
            self._add_option(f"-{char}", True, True, options)
        return f"-{flags[-1]}{arg[len(flags):]}"

    def _add_option(
        self, raw_name: str, value: Any, is_alias: bool, options: list[ParsedOption]
    ) -> None:
        existing = next((opt for opt in options if opt.raw_name == raw_name), None)
        if existing:
            if isinstance(existing.value, list):
                existing.value.append(value)
            else:
                existing.value = [existing.value, value]
            return
        options.append(
            ParsedOption(
                raw_name=raw_name,
                cleaned_name=raw_name[1:] if is_alias else raw_name[2:],
                is_alias=is_alias,
                value=value,
            )
        )

    def _get_possible_commands(
        self, first_option_index: int, remaining_args: list[str]
    ) -> list[str]:
        # Every token before the first option is a leftover, so the first
        # option's index is also the number of leftovers preceding it.
        if self.config.allow_commands_after_options or first_option_index == -1:
            return list(remaining_args)
        return remaining_args[:first_option_index]
