import pytest

from cliroute.definitions import ParameterDefinition
from cliroute.exceptions import ParameterParsingError, TypeCastingError
from cliroute.parser import DefaultParameterParser, ParserConfig


def param(index, name, **kwargs):
    return ParameterDefinition(index=index, name=name, property_name=name, **kwargs)


def values(evaluated):
    return {parameter.definition.name: parameter.value for parameter in evaluated}


def test_binds_by_position():
    evaluated = DefaultParameterParser().parse_parameters(
        [param(1, "source"), param(2, "target")], ["a", "b"]
    )
    assert values(evaluated) == {"source": "a", "target": "b"}


def test_definitions_are_sorted_by_index():
    evaluated = DefaultParameterParser().parse_parameters(
        [param(2, "target"), param(1, "source")], ["a", "b"]
    )
    assert [parameter.definition.name for parameter in evaluated] == ["source", "target"]
    assert values(evaluated) == {"source": "a", "target": "b"}


def test_array_parameter_takes_remaining_values():
    definitions = [param(1, "a"), param(2, "b"), param(3, "rest", is_array=True)]
    evaluated = DefaultParameterParser().parse_parameters(definitions, ["a", "b", "c", "d"])
    assert evaluated[2].value == ["c", "d"]


def test_array_parameter_with_single_value_is_a_list():
    evaluated = DefaultParameterParser().parse_parameters(
        [param(1, "files", is_array=True)], ["one"]
    )
    assert evaluated[0].value == ["one"]


def test_array_elements_are_cast():
    evaluated = DefaultParameterParser().parse_parameters(
        [param(1, "ids", design_type=int, is_array=True)], ["1", "2"]
    )
    assert evaluated[0].value == [1, 2]


def test_missing_required_parameters():
    with pytest.raises(ParameterParsingError, match="Missing parameters: b, c"):
        DefaultParameterParser().parse_parameters(
            [param(1, "a"), param(2, "b"), param(3, "c")], ["x"]
        )


def test_missing_optional_parameter_is_fine():
    evaluated = DefaultParameterParser().parse_parameters(
        [param(1, "a"), param(2, "b", optional=True)], ["x"]
    )
    assert values(evaluated) == {"a": "x"}


def test_unknown_parameters_fail():
    with pytest.raises(ParameterParsingError, match="Unknown parameters: y, z"):
        DefaultParameterParser().parse_parameters([param(1, "a")], ["x", "y", "z"])


def test_unknown_parameters_ignored_when_configured():
    parser = DefaultParameterParser(ParserConfig(ignore_unknown_parameters=True))
    evaluated = parser.parse_parameters([param(1, "a")], ["x", "y"])
    assert values(evaluated) == {"a": "x"}


def test_no_definitions_and_no_values():
    assert DefaultParameterParser().parse_parameters([], []) == []


def test_cast_failure_names_parameter():
    with pytest.raises(TypeCastingError, match=r"count \[positional index 1\]"):
        DefaultParameterParser().parse_parameters(
            [param(1, "count", design_type=int)], ["many"]
        )


def test_casting_respects_type_checks():
    parser = DefaultParameterParser(ParserConfig(apply_type_casting=False))
    evaluated = parser.parse_parameters(
        [param(1, "a", design_type=int), param(2, "b", design_type=int, type_checks=True)],
        ["1", "2"],
    )
    assert values(evaluated) == {"a": "1", "b": 2}
