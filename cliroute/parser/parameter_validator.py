# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Build-time structural checks for the parameter list of a single command."""
from __future__ import annotations

from cliroute.definitions import ParameterDefinition
from cliroute.exceptions import BuildError
from cliroute.utils import get_duplicates


class ParametersValidator:
    def validate(self, definitions: list[ParameterDefinition], command_name: str) -> None:
        """
        Validate the parameter metadata of one command, ensuring that:
        - Indices are sequential starting at 1
        - No names are duplicated
        - Optional parameters always come after required ones
        - An array parameter, if any, is the last one

        Raises:
            BuildError: Naming `command_name` and listing its parameters.
        """
        ordered = sorted(definitions, key=lambda definition: definition.index)
        if not ordered:
            return
        self._is_sequential(ordered, command_name)
        self._distinct_names(ordered, command_name)
        self._optionals_after_required(ordered, command_name)
        self._nothing_after_arrays(ordered, command_name)

    def _is_sequential(self, ordered: list[ParameterDefinition], command_name: str) -> None:
        for position, definition in enumerate(ordered, start=1):
            if definition.index != position:
                raise BuildError(
                    f"Invalid parameters in {command_name}: Parameter indices must be "
                    f"sequential beginning at index 1{self._describe(ordered)}"
                )

    def _distinct_names(self, ordered: list[ParameterDefinition], command_name: str) -> None:
        if get_duplicates(ordered, lambda definition: definition.name):
            raise BuildError(
                f"Invalid parameters in {command_name}: Each parameter name should be "
                f"unique{self._describe(ordered)}"
            )

    def _optionals_after_required(
        self, ordered: list[ParameterDefinition], command_name: str
    ) -> None:
        for position, definition in enumerate(ordered):
            if definition.optional and any(
                not later.optional for later in ordered[position + 1 :]
            ):
                raise BuildError(
                    f"Invalid parameters in {command_name}: Optional parameters cannot "
                    f"come before required{self._describe(ordered)}"
                )

    def _nothing_after_arrays(
        self, ordered: list[ParameterDefinition], command_name: str
    ) -> None:
        for position, definition in enumerate(ordered):
            if definition.is_array and position < len(ordered) - 1:
                raise BuildError(
                    f"Invalid parameters in {command_name}: Only one array parameter is "
                    "allowed and that parameter should be at the last index"
                    f"{self._describe(ordered)}"
                )

    def _describe(self, ordered: list[ParameterDefinition]) -> str:
        return "".join(f"\n\t- {definition.describe()}" for definition in ordered)
