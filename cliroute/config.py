# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declarative command trees loaded from YAML or TOML files.

A config file describes the parser settings, named option containers and the tree
of groups and commands. Handlers are dotted import paths.

Example (YAML):
    name: dbtool
    version: 0.3.0
    parser:
      ignore_unknown_parameters: true
    options:
      global:
        - property: verbose
          type: bool
          alias: v
      create:
        - property: name
          required: true
        - property: force
          type: bool
          alias: f
    global_options: [global]
    groups:
      - path: db
        alias: d
        commands:
          - name: create
            handler: dbtool.commands.create
            options: [create]
            parameters:
              - index: 1
                property: target
                type: path
"""
from __future__ import annotations

import importlib
import os
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cliroute.app import CliApp
from cliroute.command import Command
from cliroute.definitions import OptionsContainer
from cliroute.exceptions import BuildError
from cliroute.group import Group
from cliroute.logger import logger
from cliroute.parser import FilePath, ParserConfig, ParserModule

TYPE_TAGS: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "path": FilePath,
    "any": object,
}

CONFIG_FILENAMES = ["cliroute.yaml", "cliroute.toml", ".cliroute.yaml", ".cliroute.toml"]


def import_action(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise BuildError(f"Invalid handler path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise BuildError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        raise BuildError(f"Module '{module_path}' has no attribute '{attr}'") from error
    if not callable(action):
        raise BuildError(f"Handler '{dotted_path}' is not callable")
    return action


def _check_type_tag(value: str) -> str:
    if value not in TYPE_TAGS:
        raise ValueError(
            f"Unknown type '{value}'. Expected one of: {', '.join(TYPE_TAGS)}"
        )
    return value


class RawOption(BaseModel):
    """Raw option model for cliroute configuration."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    property_name: str = Field(alias="property")
    type: str = "str"
    name: str | None = None
    alias: str | None = None
    description: str | None = None
    required: bool = False
    type_checks: bool | None = None
    data: Any = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        return _check_type_tag(value)


class RawParameter(BaseModel):
    """Raw positional parameter model for cliroute configuration."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    index: int
    property_name: str = Field(alias="property")
    type: str = "str"
    name: str | None = None
    description: str | None = None
    optional: bool = False
    is_array: bool = False
    type_checks: bool | None = None
    data: Any = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        return _check_type_tag(value)


class RawCommand(BaseModel):
    """Raw command model for cliroute configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str = ""
    handler: str | None = None
    path: str | None = None
    alias: str | None = None
    star: bool = False
    options: list[str] = Field(default_factory=list)
    parameters: list[RawParameter] = Field(default_factory=list)
    data: Any = None


class RawGroup(BaseModel):
    """Raw group model for cliroute configuration."""

    model_config = ConfigDict(extra="forbid")

    path: str
    name: str | None = None
    description: str = ""
    alias: str | None = None
    star: bool = False
    options: list[str] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)
    groups: list[RawGroup] = Field(default_factory=list)
    data: Any = None


RawGroup.model_rebuild()


class CliConfig(BaseModel):
    """cliroute configuration model."""

    model_config = ConfigDict(extra="forbid")

    name: str = "cli"
    version: str = "1.0.0"
    description: str = ""
    parser: ParserConfig = Field(default_factory=ParserConfig)
    options: dict[str, list[RawOption]] = Field(default_factory=dict)
    global_options: list[str] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)
    groups: list[RawGroup] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_option_references(self) -> CliConfig:
        def check(owner: str, names: list[str]) -> None:
            unknown = [name for name in names if name not in self.options]
            if unknown:
                raise ValueError(
                    f"{owner} references undefined options: {', '.join(unknown)}"
                )

        def walk(commands: list[RawCommand], groups: list[RawGroup]) -> None:
            for command in commands:
                check(f"Command '{command.name}'", command.options)
            for group in groups:
                check(f"Group '{group.path}'", group.options)
                walk(group.commands, group.groups)

        check("global_options", self.global_options)
        walk(self.commands, self.groups)
        return self

    def to_app(self) -> CliApp:
        containers = {
            name: self._build_container(name, raw_options)
            for name, raw_options in self.options.items()
        }
        root = Group(self.name, self.description)
        for container_name in self.global_options:
            root.add_options(containers[container_name])
        self._populate(root, self.commands, self.groups, containers)
        return CliApp(
            root,
            name=self.name,
            version=self.version,
            parser=ParserModule(self.parser),
        )

    def _build_container(self, name: str, raw_options: list[RawOption]) -> OptionsContainer:
        container = OptionsContainer(name)
        for raw in raw_options:
            container.add_option(
                raw.property_name,
                type=TYPE_TAGS[raw.type],
                name=raw.name,
                alias=raw.alias,
                description=raw.description,
                required=raw.required,
                data=raw.data,
                type_checks=raw.type_checks,
            )
        return container

    def _populate(
        self,
        group: Group,
        commands: list[RawCommand],
        groups: list[RawGroup],
        containers: dict[str, OptionsContainer],
    ) -> None:
        for raw_command in commands:
            command = Command(
                raw_command.name,
                raw_command.description,
                import_action(raw_command.handler) if raw_command.handler else None,
                alias=raw_command.alias,
                data=raw_command.data,
                options=[containers[name] for name in raw_command.options],
            )
            for raw in raw_command.parameters:
                command.add_parameter(
                    raw.index,
                    raw.property_name,
                    type=TYPE_TAGS[raw.type],
                    name=raw.name,
                    description=raw.description,
                    optional=raw.optional,
                    is_array=raw.is_array,
                    data=raw.data,
                    type_checks=raw.type_checks,
                )
            if raw_command.star:
                group.add_star(command)
            else:
                group.add_command(command, path=raw_command.path)

        for raw_group in groups:
            child = Group(
                raw_group.name or raw_group.path,
                raw_group.description,
                options=[containers[name] for name in raw_group.options],
            )
            self._populate(child, raw_group.commands, raw_group.groups, containers)
            if raw_group.star:
                group.add_star(child)
            else:
                group.add_group(
                    raw_group.path, child, alias=raw_group.alias, data=raw_group.data
                )


def load_config(file_path: Path | str) -> CliConfig:
    """
    Load cliroute configuration from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        CliConfig: The validated configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping.\n"
            "Example:\n"
            "name: 'mycli'\n"
            "commands:\n"
            "  - name: 'hello'\n"
            "    handler: 'my_module.hello'"
        )
    logger.debug("Loaded config from %s", path)
    return CliConfig.model_validate(raw_config)


def loader(file_path: Path | str) -> CliApp:
    """Load a config file and build a `CliApp` from it."""
    return load_config(file_path).to_app()


def find_config() -> Path | None:
    """Return the first config file found in the working directory or `$CLIROUTE_CONFIG`."""
    candidates = [Path.cwd() / filename for filename in CONFIG_FILENAMES]
    if os.environ.get("CLIROUTE_CONFIG"):
        candidates.append(Path(os.environ["CLIROUTE_CONFIG"]))
    return next((path for path in candidates if path.is_file()), None)
