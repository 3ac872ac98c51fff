# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the option and parameter metadata that commands are registered with.

Definitions are plain values built through an explicit registration API rather
than discovered from annotations: every definition carries its own type tag
(`design_type`), which the type caster reads directly.

Key Types:
- `OptionDefinition`: One named option (`--name` / `-a`).
- `ParameterDefinition`: One positional parameter, addressed by its 1-based index.
- `OptionsContainer`: A named group of option definitions that can be attached to a
  single command or to every command beneath a group.
- `MappedOptionDefinition`: An option definition paired with the container it came
  from, used by the build-time consistency checks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cliroute.exceptions import BuildError
from cliroute.utils import dasherize


@dataclass(eq=False)
class OptionDefinition:
    """
    Represents a declared command-line option.

    Attributes:
        name (str): Long name, matched as `--{name}`.
        property_name (str): Key the bound value is exposed under.
        design_type (Any): Type tag used for casting (str, float, int, Int, bool, FilePath).
        alias (str | None): Single character short name, matched as `-{alias}`.
        description (str | None): Help text.
        required (bool): True if the option must be provided.
        data (Any): Arbitrary user data carried along with the definition.
        type_checks (bool | None): Casting override; None defers to the parser config.
    """

    name: str
    property_name: str
    design_type: Any = str
    alias: str | None = None
    description: str | None = None
    required: bool = False
    data: Any = None
    type_checks: bool | None = None

    def usage(self) -> str:
        value = "=<value>" if self.design_type is not bool else ""
        if not self.alias:
            return f"--{self.name}{value}"
        return f"--{self.name}{value} | -{self.alias}{value}"


@dataclass(eq=False)
class ParameterDefinition:
    """
    Represents a declared positional parameter.

    Attributes:
        index (int): 1-based position of the parameter.
        name (str): Display name.
        property_name (str): Key the bound value is exposed under.
        design_type (Any): Type tag used for casting. For array parameters this is
            the type of each element.
        optional (bool): True if the parameter may be omitted.
        is_array (bool): True if the parameter consumes all remaining values.
        description (str | None): Help text.
        data (Any): Arbitrary user data carried along with the definition.
        type_checks (bool | None): Casting override; None defers to the parser config.
    """

    index: int
    name: str
    property_name: str
    design_type: Any = str
    optional: bool = False
    is_array: bool = False
    description: str | None = None
    data: Any = None
    type_checks: bool | None = None

    def describe(self) -> str:
        return (
            f"name={self.name}, index={self.index}, "
            f"isOptional={self.optional}, isArray={self.is_array}"
        )


class OptionsContainer:
    """
    A named group of options.

    A container is attached to a `Command` (options only for that command) or to a
    `Group` (options for every command beneath it). The same container instance may be
    reachable from several places in one path; it is only counted once.
    """

    def __init__(self, name: str, options: list[OptionDefinition] | None = None) -> None:
        self.name: str = name
        self.options: list[OptionDefinition] = list(options or [])

    def add_option(
        self,
        property_name: str,
        *,
        type: Any = str,
        name: str | None = None,
        alias: str | None = None,
        description: str | None = None,
        required: bool = False,
        data: Any = None,
        type_checks: bool | None = None,
    ) -> OptionsContainer:
        """
        Declare a new option on this container.

        Args:
            property_name (str): Key the bound value is exposed under.
            type (Any): Type tag for casting.
            name (str | None): Long name; defaults to the dasherized property name.
            alias (str | None): Single character short name.
            description (str | None): Help text.
            required (bool): Whether the option must be provided.
            data (Any): Arbitrary user data.
            type_checks (bool | None): Per-option casting override.

        Returns:
            OptionsContainer: This container, for chaining.
        """
        if not property_name:
            raise BuildError(f"Invalid options in {self.name}: property_name is required")
        self.options.append(
            OptionDefinition(
                name=name or dasherize(property_name),
                property_name=property_name,
                design_type=type,
                alias=alias,
                description=description,
                required=required,
                data=data,
                type_checks=type_checks,
            )
        )
        return self

    def __repr__(self) -> str:
        return f"OptionsContainer(name={self.name!r}, options={len(self.options)})"


@dataclass(frozen=True)
class MappedOptionDefinition:
    """An option definition together with the container that declared it."""

    container: OptionsContainer
    definition: OptionDefinition
