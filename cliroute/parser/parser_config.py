# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Configuration for the default parser implementations.

Example:
    config = ParserConfig(ignore_unknown_options=True)
    relaxed = config.merged(allow_commands_after_options=True)
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ParserConfig(BaseModel):
    """
    Settings consumed by the tokenizer and the option/parameter binders.

    Attributes:
        apply_type_casting (bool): Default True. Global default for casting option and
            parameter values to their declared type. A definition's own `type_checks`
            takes precedence when set.
        ignore_unknown_options (bool): Default False. When False, options that match no
            definition of the resolved command raise `OptionParsingError`.
        ignore_unknown_parameters (bool): Default False. When False, positional values
            left over after binding raise `ParameterParsingError`.
        allow_commands_after_options (bool): Default False. When False only tokens
            before the first option can be command names:
            - False: mycli `create` `file` --name file.txt /src/folder
            - True:  mycli `create` `file` --name file.txt `/src/folder`
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    apply_type_casting: bool = True
    ignore_unknown_options: bool = False
    ignore_unknown_parameters: bool = False
    allow_commands_after_options: bool = False

    def merged(self, **overrides: Any) -> ParserConfig:
        """Return a copy of this configuration with `overrides` applied and validated."""
        return ParserConfig.model_validate({**self.model_dump(), **overrides})
