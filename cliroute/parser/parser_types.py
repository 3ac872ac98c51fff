# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Type tags and intermediate parsing models for the cliroute parser.

Contents:
- `Int` / `FilePath`: Type tags understood by the default type caster in addition
  to the builtin `str`, `float`, `int` and `bool`.
- `ParsedOption`: An option as it was found in the raw arguments.
- `ArgumentsContext`: The tokenizer's output, consumed step by step while routes
  are resolved.
- `EvaluatedArgumentsContext`: An `ArgumentsContext` plus the route matched in the
  current step.
- `EvaluatedOption` / `EvaluatedParameter`: Definition/value pairs produced by the
  binders, the terminal output of the parser for one invocation.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from cliroute.definitions import OptionDefinition, ParameterDefinition

if TYPE_CHECKING:
    from cliroute.group import Route


class Int(int):
    """
    Type tag for integer-only values.

    `int` is accepted as the same tag. Values cast to `Int` are plain `int`s.
    """


@dataclass(frozen=True)
class FilePath:
    """
    Type tag and value for an existing file or directory.

    Attributes:
        relative (str): Path relative to the working directory it was resolved against.
        absolute (str): Absolute path.
    """

    relative: str
    absolute: str

    @classmethod
    def from_string(cls, file_path: str, cwd: str) -> FilePath:
        if os.path.isabs(file_path):
            return cls(relative=os.path.relpath(file_path, cwd), absolute=file_path)
        return cls(relative=file_path, absolute=os.path.normpath(os.path.join(cwd, file_path)))

    def __fspath__(self) -> str:
        return self.absolute

    def __str__(self) -> str:
        return self.absolute


@dataclass
class ParsedOption:
    """
    An option found in the raw arguments.

    Attributes:
        raw_name (str): The option as typed, e.g. `--name` or `-n`.
        cleaned_name (str): The name without its leading dashes.
        is_alias (bool): True for single dash options.
        value (Any): The attached string, True for a flag, or a list of those when the
            same option was given more than once.
    """

    raw_name: str
    cleaned_name: str
    is_alias: bool
    value: Any


@dataclass
class ArgumentsContext:
    """
    Result of tokenizing the raw arguments.

    `possible_commands` and `possible_parameters` are drawn from the same leftover
    tokens, in their original order. Resolved command names are stripped from the
    front of both lists as the route resolver descends.
    """

    options: list[ParsedOption] = field(default_factory=list)
    possible_commands: list[str] = field(default_factory=list)
    possible_parameters: list[str] = field(default_factory=list)


@dataclass
class EvaluatedArgumentsContext(ArgumentsContext):
    """An `ArgumentsContext` together with the route matched in the last step, if any."""

    route: Route | None = None


@dataclass
class EvaluatedOption:
    """An option definition bound to its (possibly cast) value."""

    definition: OptionDefinition
    value: Any


@dataclass
class EvaluatedParameter:
    """A parameter definition bound to its (possibly cast) value."""

    definition: ParameterDefinition
    value: Any
