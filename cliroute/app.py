# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""app.py

Defines `CliApp`, the host that drives a command tree from raw arguments to a handler
call.

Lifecycle:
1. `build()` walks the tree once and validates all option and parameter metadata.
   Metadata errors surface here as `BuildError`, before any arguments are looked at.
2. `resolve(args)` tokenizes the arguments, descends the groups one token at a time
   until a command is reached, then binds its options and parameters.
3. `run(args)` does both and calls the command's handler with the bound values,
   rendering user-facing errors to stderr and returning an exit code.

Example:
    ```
    app = CliApp(root, name="dbtool", version="0.3.0")
    sys.exit(app.run())
    ```
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Callable

from rich.markup import escape

from cliroute.command import Command
from cliroute.console import error_console
from cliroute.definitions import OptionsContainer
from cliroute.exceptions import (
    BuildError,
    CliRouteError,
    MissingCommandError,
    UnknownCommandError,
)
from cliroute.group import Group
from cliroute.logger import logger
from cliroute.parser import EvaluatedOption, EvaluatedParameter, ParserModule
from cliroute.themes import OneColors
from cliroute.tree import CommandTree, ResolvedRoute


@dataclass
class Resolution:
    """
    The outcome of resolving one invocation.

    Attributes:
        route (ResolvedRoute): The route that led to the command.
        command (Command): The resolved command.
        options (list[EvaluatedOption]): Bound options, in definition order.
        parameters (list[EvaluatedParameter]): Bound parameters, in index order.
    """

    route: ResolvedRoute
    command: Command
    options: list[EvaluatedOption] = field(default_factory=list)
    parameters: list[EvaluatedParameter] = field(default_factory=list)

    def option_values(
        self, container: OptionsContainer | str | None = None
    ) -> dict[str, Any]:
        """
        Map option property names to their bound values.

        Args:
            container (OptionsContainer | str | None): Only include options declared by
                this container, given by instance or name.
        """
        options = self.options
        if container is not None:
            containers = [
                candidate
                for candidate in self.route.containers()
                if candidate is container or candidate.name == container
            ]
            options = [
                option
                for option in options
                if any(
                    option.definition is definition
                    for candidate in containers
                    for definition in candidate.options
                )
            ]
        return {option.definition.property_name: option.value for option in options}

    def kwargs(self) -> dict[str, Any]:
        """Parameters then options, keyed by property name."""
        values = {
            parameter.definition.property_name: parameter.value
            for parameter in self.parameters
        }
        values.update(self.option_values())
        return values


class CliApp:
    """
    Host for a command tree.

    Args:
        root (Group): Root group of the command tree.
        name (str): Program name shown in messages.
        version (str): Program version.
        parser (ParserModule | None): Parser to resolve with; a default one if None.
        error_handler (Callable[[CliRouteError], Any] | None): Receives every framework
            error raised by `run()` instead of the default rendering.
    """

    def __init__(
        self,
        root: Group,
        *,
        name: str = "cli",
        version: str = "1.0.0",
        parser: ParserModule | None = None,
        error_handler: Callable[[CliRouteError], Any] | None = None,
    ) -> None:
        if error_handler is not None and not callable(error_handler):
            raise BuildError("error_handler must be a callable.")
        self.root: Group = root
        self.name: str = name
        self.version: str = version
        self.parser: ParserModule = parser or ParserModule()
        self.error_handler = error_handler
        self._tree: CommandTree | None = None

    @property
    def tree(self) -> CommandTree:
        return self.build()

    def build(self) -> CommandTree:
        """Build and validate the command tree. Later calls return the same tree."""
        if self._tree is None:
            tree = CommandTree(self.root)
            self.parser.validate(tree)
            self._tree = tree
            logger.debug("Built '%s' with %d routes", self.name, len(tree.routes))
        return self._tree

    def resolve(self, args: list[str]) -> Resolution:
        """
        Resolve `args` to a command and bind its options and parameters.

        Raises:
            BuildError: If the command tree is invalid.
            UnknownCommandError: If a token matches no route and there is no star route.
            MissingCommandError: If the arguments run out before a command is reached.
            ParsingError: If the options or parameters do not fit the command.
        """
        tree = self.build()
        group = self.root
        path: list[str] = []
        context: Any = list(args)

        while True:
            evaluated = self.parser.evaluate_context(context, group.routes)
            route = evaluated.route
            if route is None:
                if evaluated.possible_commands:
                    raise UnknownCommandError(
                        "Unknown command: No commands exist with the name "
                        f"'{evaluated.possible_commands[0]}'"
                    )
                where = f" for '{' '.join(path)}'" if path else ""
                raise MissingCommandError(f"Expected a command{where}")
            path.append(route.path)
            context = evaluated
            if isinstance(route.target, Command):
                break
            group = route.target

        resolved = tree.get(" ".join(path))
        if resolved.route is not route or resolved.command is None:
            raise BuildError(f"Route '{resolved.id}' does not match the resolved command")
        logger.debug("Resolved %s to '%s'", args, resolved.id)
        options = self.parser.evaluate_options(resolved, context.options)
        parameters = self.parser.evaluate_parameters(
            resolved.command.parameters, context.possible_parameters
        )
        return Resolution(
            route=resolved,
            command=resolved.command,
            options=options,
            parameters=parameters,
        )

    def run(self, args: list[str] | None = None) -> int:
        """
        Resolve `args` (default `sys.argv[1:]`) and call the command's handler.

        Returns:
            int: 0 on success, 1 when a user-facing error was rendered.

        Raises:
            BuildError: Re-raised after rendering, unless an `error_handler` is set.
        """
        if args is None:
            args = sys.argv[1:]
        try:
            resolution = self.resolve(args)
        except CliRouteError as error:
            if self.error_handler:
                self.error_handler(error)
                return 1
            self.render_error(error)
            if isinstance(error, BuildError):
                raise
            return 1

        handler = resolution.command.handler
        if handler is None:
            logger.debug("Command '%s' has no handler", resolution.route.id)
            return 0
        handler(**resolution.kwargs())
        return 0

    def render_error(self, error: CliRouteError) -> None:
        if isinstance(error, BuildError):
            error_console.print(
                f"[{OneColors.DARK_RED}]❌ {escape(self.name)}: invalid command tree\n"
                f"{escape(str(error))}[/]"
            )
            return
        error_console.print(f"[{OneColors.DARK_RED}]❌ Error: {escape(str(error))}[/]")

    def __repr__(self) -> str:
        return f"CliApp(name={self.name!r}, version={self.version!r}, root={self.root!r})"
