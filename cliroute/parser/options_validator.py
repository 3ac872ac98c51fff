# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Build-time consistency checks for the option metadata reachable from one command.

The same option may be declared by several containers along one path (for example a
`--verbose` on a group and on a command beneath it). That is allowed only when the
duplicates would be parsed identically.
"""
from __future__ import annotations

from typing import Any, Callable

from cliroute.definitions import MappedOptionDefinition, OptionDefinition
from cliroute.exceptions import BuildError
from cliroute.utils import get_duplicates, remove_duplicates, validate_unique_values


class OptionsValidator:
    """Raises `BuildError` on inconsistent or duplicated option metadata."""

    def validate(self, definitions: list[MappedOptionDefinition]) -> None:
        """
        Validate all option metadata of one execution path.

        Args:
            definitions (list[MappedOptionDefinition]): Options with their containers.

        Raises:
            BuildError: On the first inconsistency found.
        """
        self._validate_aliases(definitions)
        self._no_duplicates_per_container(definitions)
        self._check_inconsistent_duplicates(
            definitions, "name", lambda d: d.name, "aliases", lambda d: d.alias
        )
        self._check_inconsistent_duplicates(
            [mapped for mapped in definitions if mapped.definition.alias],
            "alias",
            lambda d: d.alias,
            "names",
            lambda d: d.name,
        )
        self._check_inconsistent_duplicates(
            definitions, "name", lambda d: d.name, "types", lambda d: d.design_type
        )
        self._check_inconsistent_duplicates(
            definitions,
            "name",
            lambda d: d.name,
            "descriptions",
            lambda d: d.description,
        )
        self._check_inconsistent_duplicates(
            definitions,
            "name",
            lambda d: d.name,
            "required flags",
            lambda d: d.required,
        )
        self._no_name_alias_conflicts(definitions)

    def _validate_aliases(self, definitions: list[MappedOptionDefinition]) -> None:
        for mapped in definitions:
            alias = mapped.definition.alias
            if alias is not None and len(alias) != 1:
                raise BuildError(
                    f"Invalid options: The option alias -{alias} in the container "
                    f"{mapped.container.name} must be exactly one character long"
                )

    def _no_duplicates_per_container(
        self, definitions: list[MappedOptionDefinition]
    ) -> None:
        containers = remove_duplicates(
            definitions, lambda first, second: first.container is second.container
        )
        for mapped in containers:
            owned = [d for d in definitions if d.container is mapped.container]
            validate_unique_values(
                owned,
                lambda d: d.definition.name,
                lambda value, first, _: f"Invalid options: {first.container.name} has "
                f'two options with the same name "{value}" in a single execution path',
            )
            validate_unique_values(
                [d for d in owned if d.definition.alias],
                lambda d: d.definition.alias,
                lambda value, first, _: f"Invalid options: {first.container.name} has "
                f'two options with the same alias "{value}" in a single execution path',
            )

    def _no_name_alias_conflicts(self, definitions: list[MappedOptionDefinition]) -> None:
        for first in definitions:
            conflict = next(
                (
                    second
                    for second in definitions
                    if second.definition.alias == first.definition.name
                ),
                None,
            )
            if conflict:
                raise BuildError(
                    "Invalid options: The name and alias are the same for one or more "
                    "options in a single execution path"
                    f"{self._describe(first)}{self._describe(conflict)}"
                )

    def _check_inconsistent_duplicates(
        self,
        definitions: list[MappedOptionDefinition],
        property_name: str,
        prop: Callable[[OptionDefinition], Any],
        other_property_name: str,
        other_prop: Callable[[OptionDefinition], Any],
    ) -> None:
        for duplicates in get_duplicates(definitions, lambda d: prop(d.definition)):
            distinct = remove_duplicates(
                duplicates,
                lambda first, second: other_prop(first.definition)
                == other_prop(second.definition),
            )
            if len(distinct) > 1:
                raise BuildError(
                    f"Invalid options: One or more options have the same {property_name} "
                    f"but different {other_property_name} in a single execution path"
                    + "".join(self._describe(mapped) for mapped in distinct)
                )

    def _describe(self, mapped: MappedOptionDefinition) -> str:
        definition = mapped.definition
        type_name = getattr(definition.design_type, "__name__", definition.design_type)
        return (
            f"\n\t- {mapped.container.name}: name={definition.name}, "
            f"alias={definition.alias}, type={type_name}"
        )
