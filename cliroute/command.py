# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the `Command` class, a leaf of the command tree.

A Command carries the positional parameters and option containers it is parsed
against, and optionally a handler the host calls with the bound values.

Example:
    create = Command("create", "Create a database", handler=create_db)
    create.add_parameter(1, "target", type=str)
    create.add_options(OptionsContainer("create").add_option("force", type=bool, alias="f"))
"""
from __future__ import annotations

from typing import Any, Callable

from cliroute.definitions import OptionsContainer, ParameterDefinition
from cliroute.exceptions import BuildError
from cliroute.utils import dasherize


class Command:
    """
    A resolvable command.

    Attributes:
        name (str): Default route path for the command.
        description (str): Help text.
        handler (Callable | None): Called by `CliApp.run` with the bound values as
            keyword arguments.
        alias (str | None): Default route alias.
        data (Any): Arbitrary user data.
        parameters (list[ParameterDefinition]): Positional parameters.
        options (list[OptionsContainer]): Option containers scoped to this command.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        handler: Callable[..., Any] | None = None,
        *,
        alias: str | None = None,
        data: Any = None,
        parameters: list[ParameterDefinition] | None = None,
        options: list[OptionsContainer] | None = None,
    ) -> None:
        if not name:
            raise BuildError("Command name must be a non-empty string.")
        if handler is not None and not callable(handler):
            raise BuildError(f"Handler for command '{name}' must be callable.")
        self.name: str = name
        self.description: str = description
        self.handler: Callable[..., Any] | None = handler
        self.alias: str | None = alias
        self.data: Any = data
        self.parameters: list[ParameterDefinition] = list(parameters or [])
        self.options: list[OptionsContainer] = []
        for container in options or []:
            self.add_options(container)

    def add_parameter(
        self,
        index: int,
        property_name: str,
        *,
        type: Any = str,
        name: str | None = None,
        description: str | None = None,
        optional: bool = False,
        is_array: bool = False,
        data: Any = None,
        type_checks: bool | None = None,
    ) -> Command:
        """
        Declare a positional parameter.

        Args:
            index (int): 1-based position.
            property_name (str): Key the bound value is exposed under.
            type (Any): Type tag for casting; the element type for array parameters.
            name (str | None): Display name; defaults to the dasherized property name.
            description (str | None): Help text.
            optional (bool): Whether the parameter may be omitted.
            is_array (bool): Whether the parameter takes all remaining values.
            data (Any): Arbitrary user data.
            type_checks (bool | None): Per-parameter casting override.

        Returns:
            Command: This command, for chaining.
        """
        self.parameters.append(
            ParameterDefinition(
                index=index,
                name=name or dasherize(property_name),
                property_name=property_name,
                design_type=type,
                optional=optional,
                is_array=is_array,
                description=description,
                data=data,
                type_checks=type_checks,
            )
        )
        return self

    def add_options(self, container: OptionsContainer) -> Command:
        """Scope an options container to this command."""
        if not isinstance(container, OptionsContainer):
            raise BuildError(
                f"Invalid options in {self.name}: expected an OptionsContainer, "
                f"got {type(container).__name__}"
            )
        if any(existing is container for existing in self.options):
            raise BuildError(
                f"Invalid options in {self.name}: The same options '{container.name}' "
                "has been included more than once"
            )
        self.options.append(container)
        return self

    def __repr__(self) -> str:
        return (
            f"Command(name={self.name!r}, parameters={len(self.parameters)}, "
            f"options={[container.name for container in self.options]})"
        )
