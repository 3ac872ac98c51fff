import pytest

from cliroute.definitions import MappedOptionDefinition, OptionsContainer
from cliroute.exceptions import BuildError
from cliroute.parser import OptionsValidator


def mapped(*containers):
    return [
        MappedOptionDefinition(container=container, definition=definition)
        for container in containers
        for definition in container.options
    ]


def test_accepts_distinct_options():
    first = OptionsContainer("first").add_option("name", alias="n")
    second = OptionsContainer("second").add_option("port", type=int, alias="p")
    OptionsValidator().validate(mapped(first, second))


def test_accepts_identical_duplicates_across_containers():
    first = OptionsContainer("first").add_option("port", type=int, alias="p", description="Port")
    second = OptionsContainer("second").add_option("port", type=int, alias="p", description="Port")
    OptionsValidator().validate(mapped(first, second))


@pytest.mark.parametrize("alias", ["ab", ""])
def test_rejects_alias_not_one_character(alias):
    container = OptionsContainer("opts").add_option("name", alias=alias)
    with pytest.raises(BuildError, match="must be exactly one character long"):
        OptionsValidator().validate(mapped(container))


def test_rejects_duplicate_name_in_one_container():
    container = OptionsContainer("opts").add_option("name").add_option("other", name="name")
    with pytest.raises(BuildError, match='opts has two options with the same name "name"'):
        OptionsValidator().validate(mapped(container))


def test_rejects_duplicate_alias_in_one_container():
    container = OptionsContainer("opts").add_option("name", alias="n").add_option("number", alias="n")
    with pytest.raises(BuildError, match='opts has two options with the same alias "n"'):
        OptionsValidator().validate(mapped(container))


def test_rejects_same_name_different_types():
    first = OptionsContainer("first").add_option("port", type=int)
    second = OptionsContainer("second").add_option("port", type=str)
    with pytest.raises(BuildError, match="same name but different types"):
        OptionsValidator().validate(mapped(first, second))


def test_rejects_same_name_different_aliases():
    first = OptionsContainer("first").add_option("port", alias="p")
    second = OptionsContainer("second").add_option("port", alias="o")
    with pytest.raises(BuildError, match="same name but different aliases"):
        OptionsValidator().validate(mapped(first, second))


def test_rejects_same_alias_different_names():
    first = OptionsContainer("first").add_option("port", alias="p")
    second = OptionsContainer("second").add_option("path", alias="p")
    with pytest.raises(BuildError, match="same alias but different names"):
        OptionsValidator().validate(mapped(first, second))


def test_rejects_same_name_different_descriptions():
    first = OptionsContainer("first").add_option("port", description="one")
    second = OptionsContainer("second").add_option("port", description="two")
    with pytest.raises(BuildError, match="same name but different descriptions"):
        OptionsValidator().validate(mapped(first, second))


def test_rejects_same_name_different_required_flags():
    first = OptionsContainer("first").add_option("port", required=True)
    second = OptionsContainer("second").add_option("port")
    with pytest.raises(BuildError, match="same name but different required flags"):
        OptionsValidator().validate(mapped(first, second))


def test_rejects_name_matching_another_alias():
    first = OptionsContainer("first").add_option("v")
    second = OptionsContainer("second").add_option("verbose", alias="v")
    with pytest.raises(BuildError, match="name and alias are the same") as excinfo:
        OptionsValidator().validate(mapped(first, second))
    assert "first: name=v" in str(excinfo.value)
    assert "second: name=verbose, alias=v" in str(excinfo.value)


def test_error_lists_conflicting_containers():
    first = OptionsContainer("global").add_option("port", type=int)
    second = OptionsContainer("server").add_option("port", type=str)
    with pytest.raises(BuildError) as excinfo:
        OptionsValidator().validate(mapped(first, second))
    message = str(excinfo.value)
    assert "global: name=port, alias=None, type=int" in message
    assert "server: name=port, alias=None, type=str" in message
