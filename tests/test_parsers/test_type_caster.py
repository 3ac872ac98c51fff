import os

import pytest

from cliroute.definitions import OptionDefinition, ParameterDefinition
from cliroute.exceptions import TypeCastingError
from cliroute.parser import DefaultTypeCaster, FilePath, Int, ParsedOption


@pytest.fixture
def caster():
    return DefaultTypeCaster()


# --- Strings ---
@pytest.mark.parametrize("value, expected", [("hello", "hello"), (42, "42"), ("", "")])
def test_cast_string(caster, value, expected):
    assert caster.cast_string(value, False) == expected


@pytest.mark.parametrize("value", [True, None, object()])
def test_cast_string_rejects_non_strings(caster, value):
    with pytest.raises(TypeCastingError, match="only accepts strings"):
        caster.cast_string(value, True)


# --- Numbers ---
@pytest.mark.parametrize(
    "value, expected",
    [("42", 42.0), ("-7", -7.0), ("3.14", 3.14), ("-0.5", -0.5), (2, 2.0)],
)
def test_cast_number(caster, value, expected):
    assert caster.cast_number(value, False) == expected


@pytest.mark.parametrize(
    "value", ["abc", "1.2.3", "1e5", "+1", "1.", ".5", "1a5", "", "1.5\n", " 2"]
)
def test_cast_number_rejects_invalid(caster, value):
    with pytest.raises(TypeCastingError, match="only accepts numbers"):
        caster.cast_number(value, False)


# --- Integers ---
@pytest.mark.parametrize("value, expected", [("-7", -7), ("0", 0), ("123", 123)])
def test_cast_int(caster, value, expected):
    result = caster.cast_int(value, False)
    assert result == expected
    assert isinstance(result, int)


@pytest.mark.parametrize("value", ["1.5", "abc", "", "--1", "5\n", "5 "])
def test_cast_int_rejects_invalid(caster, value):
    with pytest.raises(TypeCastingError, match="only accepts integers"):
        caster.cast_int(value, False)


@pytest.mark.parametrize("design_type", [int, Int])
def test_int_and_int_tag_are_equivalent(caster, design_type):
    assert caster.cast("12", design_type, True) == 12


# --- Booleans ---
@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        ("true", True),
        ("TRUE", True),
        ("False", False),
        ("1", True),
        ("0", False),
        (1, True),
        (0, False),
    ],
)
def test_cast_boolean(caster, value, expected):
    assert caster.cast_boolean(value, True) is expected


def test_cast_boolean_rejects_yes_for_options(caster):
    with pytest.raises(TypeCastingError, match="boolean flag"):
        caster.cast_boolean("yes", True)


def test_cast_boolean_rejects_yes_for_parameters(caster):
    with pytest.raises(TypeCastingError, match="can be 0 or 1, true or false"):
        caster.cast_boolean("yes", False)


# --- Paths ---
def test_cast_file_path_relative(caster, tmp_path, monkeypatch):
    (tmp_path / "data.txt").write_text("content")
    monkeypatch.chdir(tmp_path)
    result = caster.cast_file_path("data.txt")
    assert isinstance(result, FilePath)
    assert result.relative == "data.txt"
    assert result.absolute == os.path.join(os.getcwd(), "data.txt")
    assert os.fspath(result) == result.absolute


def test_cast_file_path_absolute(caster, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = os.path.join(os.getcwd(), "folder")
    os.mkdir(target)
    result = caster.cast_file_path(target)
    assert result.absolute == target
    assert result.relative == "folder"


def test_cast_file_path_missing(caster, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(TypeCastingError, match="not a valid file or directory"):
        caster.cast_file_path("missing.txt")


# --- Dispatch ---
def test_unknown_type_passes_through(caster):
    value = "anything"
    assert caster.cast(value, dict, False) is value


def test_lists_are_cast_per_element(caster):
    assert caster.cast(["1", "2", "3"], int, False) == [1, 2, 3]


def test_cast_option_error_names_option(caster):
    definition = OptionDefinition(name="port", property_name="port", design_type=int, alias="p")
    parsed = ParsedOption(raw_name="--port", cleaned_name="port", is_alias=False, value="http")
    with pytest.raises(TypeCastingError) as excinfo:
        caster.cast_option(definition, parsed)
    error = excinfo.value
    assert "Invalid value 'http' for option --port [-p]." in str(error)
    assert error.target == "port"
    assert error.is_option is True
    assert error.value == "http"


def test_cast_parameter_error_names_position(caster):
    definition = ParameterDefinition(
        index=2, name="count", property_name="count", design_type=int
    )
    with pytest.raises(TypeCastingError) as excinfo:
        caster.cast_parameter(definition, "many")
    error = excinfo.value
    assert "for parameter count [positional index 2]" in str(error)
    assert error.is_option is False


def test_cast_parameter_error_prints_lists(caster):
    definition = ParameterDefinition(
        index=1, name="ids", property_name="ids", design_type=int, is_array=True
    )
    with pytest.raises(TypeCastingError, match=r"Invalid value '\['1', 'x'\]'"):
        caster.cast_parameter(definition, ["1", "x"])
