# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""group.py

Defines `Group`, an internal node of the command tree, and `Route`, the edge from a
group to a child command or nested group.

A group may own one star route (path `*`). The star route is never selected by name
or alias; it is the fallback when the next token matches no other route.

Example:
    db = Group("db", "Database commands")
    db.add_command(create)
    db.add_star(status)

    root = Group("root")
    root.add_group("db", db, alias="d")
    root.add_options(global_options)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cliroute.command import Command
from cliroute.definitions import OptionsContainer
from cliroute.exceptions import BuildError

STAR_PATH = "*"


def _check_route_token(group_name: str, kind: str, token: str | None) -> None:
    if token is not None and (not token or any(char.isspace() for char in token)):
        raise BuildError(
            f"Invalid commands in {group_name}: the command {kind} '{token}' must be a "
            "single non-empty word"
        )


@dataclass(eq=False)
class Route:
    """
    An edge of the command tree.

    Attributes:
        path (str): Token that selects this route, or `*` for the star route.
        target (Command | Group): The command or nested group the route leads to.
        alias (str | None): Alternative token that selects this route.
        description (str | None): Help text.
        data (Any): Arbitrary user data.
    """

    path: str
    target: Command | Group
    alias: str | None = None
    description: str | None = None
    data: Any = None

    @property
    def is_star(self) -> bool:
        return self.path == STAR_PATH

    @property
    def is_command(self) -> bool:
        return isinstance(self.target, Command)

    def matches(self, token: str) -> bool:
        """Return True if `token` selects this route by path or alias."""
        if self.is_star:
            return False
        return self.path == token or (self.alias is not None and self.alias == token)


class Group:
    """
    A named collection of routes.

    Option containers attached to a group apply to every command beneath it.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        *,
        options: list[OptionsContainer] | None = None,
    ) -> None:
        self.name: str = name
        self.description: str = description
        self.routes: list[Route] = []
        self.options: list[OptionsContainer] = []
        for container in options or []:
            self.add_options(container)

    @property
    def star_route(self) -> Route | None:
        return next((route for route in self.routes if route.is_star), None)

    def add_command(
        self,
        command: Command,
        *,
        path: str | None = None,
        alias: str | None = None,
        description: str | None = None,
        data: Any = None,
    ) -> Group:
        """
        Route to a command. Path, alias, description and data default to the command's own.
        """
        if not isinstance(command, Command):
            raise BuildError(
                f"Invalid commands in {self.name}: expected a Command, "
                f"got {type(command).__name__}"
            )
        path = path or command.name
        alias = alias if alias is not None else command.alias
        _check_route_token(self.name, "name", path)
        _check_route_token(self.name, "alias", alias)
        self.routes.append(
            Route(
                path=path,
                target=command,
                alias=alias,
                description=description if description is not None else command.description,
                data=data if data is not None else command.data,
            )
        )
        return self

    def add_group(
        self,
        path: str,
        group: Group,
        *,
        alias: str | None = None,
        description: str | None = None,
        data: Any = None,
    ) -> Group:
        """Route to a nested group."""
        if not isinstance(group, Group):
            raise BuildError(
                f"Invalid commands in {self.name}: expected a Group, "
                f"got {type(group).__name__}"
            )
        if path != STAR_PATH:
            _check_route_token(self.name, "name", path)
        _check_route_token(self.name, "alias", alias)
        self.routes.append(
            Route(
                path=path,
                target=group,
                alias=alias,
                description=description if description is not None else group.description,
                data=data,
            )
        )
        return self

    def add_star(
        self, target: Command | Group, *, description: str | None = None
    ) -> Group:
        """Register the fallback route used when no named route matches."""
        if isinstance(target, Group):
            return self.add_group(STAR_PATH, target, description=description)
        if not isinstance(target, Command):
            raise BuildError(
                f"Invalid commands in {self.name}: expected a Command or Group, "
                f"got {type(target).__name__}"
            )
        self.routes.append(
            Route(
                path=STAR_PATH,
                target=target,
                description=description if description is not None else target.description,
                data=target.data,
            )
        )
        return self

    def add_options(self, container: OptionsContainer) -> Group:
        """Attach an options container to every command beneath this group."""
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
        return f"Group(name={self.name!r}, routes={[route.path for route in self.routes]})"
