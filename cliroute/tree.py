# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""tree.py

Builds the registry of every route reachable from a root `Group`.

The build is a depth-first walk that:
- rejects cycles (a group reachable from itself),
- rejects duplicated route paths or aliases and more than one star route per group,
- registers each route under a stable id, the space-joined paths from the root
  (e.g. `"db create"`), together with the groups above it.

A group may appear under several parents; each appearance gets its own ids, since the
options that apply to its commands depend on the path taken.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from cliroute.command import Command
from cliroute.definitions import MappedOptionDefinition, OptionDefinition, OptionsContainer
from cliroute.exceptions import BuildError
from cliroute.group import Group, Route
from cliroute.logger import logger
from cliroute.utils import remove_duplicates, validate_unique_values


@dataclass(eq=False)
class ResolvedRoute:
    """
    A route together with its position in the tree.

    Attributes:
        id (str): Space-joined route paths from the root.
        route (Route): The route itself.
        parents (list[Group]): Groups from the root down to the group owning the route.
    """

    id: str
    route: Route
    parents: list[Group] = field(default_factory=list)

    @property
    def is_command(self) -> bool:
        return self.route.is_command

    @property
    def command(self) -> Command | None:
        return self.route.target if isinstance(self.route.target, Command) else None

    def containers(self) -> list[OptionsContainer]:
        """Option containers in scope, outermost group first, each counted once."""
        containers: list[OptionsContainer] = []
        for group in self.parents:
            containers.extend(group.options)
        target = self.route.target
        containers.extend(target.options)
        return remove_duplicates(containers, lambda first, second: first is second)

    def option_definitions(self) -> list[OptionDefinition]:
        return [
            definition
            for container in self.containers()
            for definition in container.options
        ]

    def mapped_options(self) -> list[MappedOptionDefinition]:
        return [
            MappedOptionDefinition(container=container, definition=definition)
            for container in self.containers()
            for definition in container.options
        ]


class CommandTree:
    """Registry of every route reachable from `root`, keyed by route id."""

    def __init__(self, root: Group) -> None:
        if not isinstance(root, Group):
            raise BuildError(f"The root of a command tree must be a Group, got {root!r}")
        self.root: Group = root
        self.routes: dict[str, ResolvedRoute] = {}
        self._build(root, [root], [])
        logger.debug("Built command tree with %d routes", len(self.routes))

    def get(self, route_id: str) -> ResolvedRoute:
        try:
            return self.routes[route_id]
        except KeyError:
            raise BuildError(f"No route registered under '{route_id}'") from None

    def commands(self) -> Iterator[ResolvedRoute]:
        """Yield every route leading to a command, in declaration order."""
        return (resolved for resolved in self.routes.values() if resolved.is_command)

    def _build(self, group: Group, chain: list[Group], path: list[str]) -> None:
        self._check_routes(group, path)
        for route in group.routes:
            route_path = [*path, route.path]
            route_id = " ".join(route_path)
            if route_id in self.routes:
                raise BuildError(
                    f"Invalid commands in {group.name}: route '{route_id}' is registered "
                    "more than once"
                )
            self.routes[route_id] = ResolvedRoute(
                id=route_id, route=route, parents=list(chain)
            )
            if isinstance(route.target, Group):
                if any(ancestor is route.target for ancestor in chain):
                    cycle = " -> ".join([*(g.name for g in chain), route.target.name])
                    raise BuildError(
                        f"Invalid commands in {group.name}: circular group reference "
                        f"{cycle}"
                    )
                self._build(route.target, [*chain, route.target], route_path)

    def _check_routes(self, group: Group, path: list[str]) -> None:
        name = " ".join(path) or group.name
        validate_unique_values(
            group.routes,
            lambda route: route.path,
            lambda value, *_: f"Invalid commands in {name}: Two or more "
            f'commands/subcommands exist with the same command name "{value}"',
        )
        validate_unique_values(
            [route for route in group.routes if route.alias],
            lambda route: route.alias,
            lambda value, *_: f"Invalid commands in {name}: Two or more "
            f'commands/subcommands exist with the same command alias "{value}"',
        )
