# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Casts option and parameter values to their declared type tags.

Behavior of `DefaultTypeCaster`:
- `str`: accepts strings and numbers, returns the string form.
- `float`: accepts an optional leading `-`, digits and at most one decimal point;
  returns a float.
- `int` / `Int`: as `float` without a decimal point; returns an int.
- `bool`: accepts booleans, `'true'` / `'false'` in any case, and `'1'` / `'0'`.
- `FilePath`: resolves the value against the working directory and requires the
  path to exist.
- Any other type tag: the value is returned unchanged.
- Lists (repeated options, array parameters) are cast element by element.
"""
from __future__ import annotations

import os
import re
from typing import Any

from cliroute.definitions import OptionDefinition, ParameterDefinition
from cliroute.exceptions import TypeCastingError
from cliroute.parser.parser_types import FilePath, Int, ParsedOption

NUMBER_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")
INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def _kind(is_option: bool) -> str:
    return "option" if is_option else "parameter"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class DefaultTypeCaster:
    """Stateless caster for the builtin type tags plus `Int` and `FilePath`."""

    def cast_option(self, definition: OptionDefinition, parsed: ParsedOption) -> Any:
        """
        Cast a parsed option value to the option's declared type.

        Raises:
            TypeCastingError: Naming the option and its alias.
        """
        try:
            return self.cast(parsed.value, definition.design_type, True)
        except TypeCastingError as error:
            alias = f" [-{definition.alias}]" if definition.alias else ""
            raise TypeCastingError(
                f"Invalid value '{self._print_value(parsed.value)}' for option "
                f"--{definition.name}{alias}. {error}",
                target=definition.name,
                is_option=True,
                value=parsed.value,
            ) from error

    def cast_parameter(self, definition: ParameterDefinition, value: Any) -> Any:
        """
        Cast a positional value to the parameter's declared type.

        Raises:
            TypeCastingError: Naming the parameter and its position.
        """
        try:
            return self.cast(value, definition.design_type, False)
        except TypeCastingError as error:
            raise TypeCastingError(
                f"Invalid value '{self._print_value(value)}' for parameter "
                f"{definition.name} [positional index {definition.index}]. {error}",
                target=definition.name,
                is_option=False,
                value=value,
            ) from error

    def cast(self, value: Any, design_type: Any, is_option: bool) -> Any:
        if isinstance(value, list):
            return [self.cast(item, design_type, is_option) for item in value]
        if design_type is str:
            return self.cast_string(value, is_option)
        if design_type is float:
            return self.cast_number(value, is_option)
        if design_type is int or design_type is Int:
            return self.cast_int(value, is_option)
        if design_type is bool:
            return self.cast_boolean(value, is_option)
        if design_type is FilePath:
            return self.cast_file_path(value)
        return value

    def cast_string(self, value: Any, is_option: bool) -> str:
        if isinstance(value, str) or _is_number(value):
            return str(value)
        raise TypeCastingError(f"This {_kind(is_option)} only accepts strings")

    def cast_number(self, value: Any, is_option: bool) -> float:
        if (isinstance(value, str) or _is_number(value)) and NUMBER_PATTERN.fullmatch(
            str(value)
        ):
            return float(value)
        raise TypeCastingError(f"This {_kind(is_option)} only accepts numbers")

    def cast_int(self, value: Any, is_option: bool) -> int:
        if (isinstance(value, str) or _is_number(value)) and INTEGER_PATTERN.fullmatch(
            str(value)
        ):
            return int(value)
        raise TypeCastingError(f"This {_kind(is_option)} only accepts integers")

    def cast_boolean(self, value: Any, is_option: bool) -> bool:
        if isinstance(value, bool):
            return value
        text = str(value)
        if text.lower() == "true" or text == "1":
            return True
        if text.lower() == "false" or text == "0":
            return False
        if is_option:
            raise TypeCastingError(
                "This option is a boolean flag and therefore does not take a value"
            )
        raise TypeCastingError(
            "This parameter only accepts boolean which can be 0 or 1, true or false"
        )

    def cast_file_path(self, value: Any) -> FilePath:
        file_path = FilePath.from_string(str(value), os.getcwd())
        if not os.path.exists(file_path.absolute):
            raise TypeCastingError("The provided path is not a valid file or directory")
        return file_path

    def _print_value(self, value: Any) -> str:
        if isinstance(value, list):
            return "[" + ", ".join(f"'{item}'" for item in value) + "]"
        return str(value)
