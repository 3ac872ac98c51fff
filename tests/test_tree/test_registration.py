import pytest

from cliroute.command import Command
from cliroute.definitions import OptionsContainer
from cliroute.exceptions import BuildError
from cliroute.group import STAR_PATH, Group


def test_add_option_defaults_name_from_property():
    container = OptionsContainer("opts").add_option("dry_run", type=bool).add_option("maxRetries")
    assert [option.name for option in container.options] == ["dry-run", "max-retries"]
    assert container.options[0].property_name == "dry_run"
    assert container.options[0].design_type is bool


def test_add_option_requires_property_name():
    with pytest.raises(BuildError, match="property_name is required"):
        OptionsContainer("opts").add_option("")


def test_option_usage():
    container = (
        OptionsContainer("opts")
        .add_option("name", alias="n")
        .add_option("force", type=bool, alias="f")
    )
    assert container.options[0].usage() == "--name=<value> | -n=<value>"
    assert container.options[1].usage() == "--force | -f"


def test_add_parameter():
    command = Command("copy").add_parameter(1, "sourceFile").add_parameter(
        2, "targets", is_array=True, optional=True
    )
    first, second = command.parameters
    assert first.name == "source-file"
    assert first.property_name == "sourceFile"
    assert second.is_array and second.optional


def test_command_rejects_non_callable_handler():
    with pytest.raises(BuildError, match="must be callable"):
        Command("run", handler="not callable")


def test_command_requires_name():
    with pytest.raises(BuildError, match="non-empty"):
        Command("")


def test_container_attached_once_per_command():
    container = OptionsContainer("opts")
    command = Command("run", options=[container])
    with pytest.raises(BuildError, match="included more than once"):
        command.add_options(container)


def test_group_rejects_wrong_types():
    with pytest.raises(BuildError, match="expected a Command"):
        Group("root").add_command(Group("nested"))
    with pytest.raises(BuildError, match="expected a Group"):
        Group("root").add_group("nested", Command("run"))
    with pytest.raises(BuildError, match="expected an OptionsContainer"):
        Group("root").add_options("opts")


def test_add_command_defaults_from_command():
    command = Command("create", "Create it", alias="c", data={"tag": 1})
    route = Group("root").add_command(command).routes[0]
    assert route.path == "create"
    assert route.alias == "c"
    assert route.description == "Create it"
    assert route.data == {"tag": 1}


def test_add_command_overrides():
    route = Group("root").add_command(Command("create"), path="new", alias="n").routes[0]
    assert route.path == "new"
    assert route.alias == "n"


def test_add_star():
    fallback = Command("help")
    group = Group("root").add_command(Command("run")).add_star(fallback)
    star = group.star_route
    assert star.path == STAR_PATH
    assert star.target is fallback
    assert star.alias is None
    assert star.is_star
    assert not star.matches("*")
    assert not star.matches("help")


def test_route_matches_path_and_alias():
    route = Group("root").add_command(Command("run", alias="r")).routes[0]
    assert route.matches("run")
    assert route.matches("r")
    assert not route.matches("x")


@pytest.mark.parametrize(
    "path, alias", [("a b", None), ("run", "r x"), ("run", ""), ("\tx", None)]
)
def test_add_command_rejects_route_tokens_with_spaces(path, alias):
    with pytest.raises(BuildError, match="must be a single non-empty word"):
        Group("root").add_command(Command("run"), path=path, alias=alias)


def test_add_command_rejects_spaced_command_name():
    with pytest.raises(BuildError, match="the command name 'a b'"):
        Group("root").add_command(Command("a b"))


def test_add_group_rejects_spaced_path_and_alias():
    with pytest.raises(BuildError, match="the command name 'a b'"):
        Group("root").add_group("a b", Group("nested"))
    with pytest.raises(BuildError, match="the command alias 'x y'"):
        Group("root").add_group("nested", Group("nested"), alias="x y")
