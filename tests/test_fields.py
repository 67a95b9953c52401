import pytest

from ezparse.errors import MalformedParameterListError
from ezparse.fields import (
	is_method,
	is_private_token,
	parse_custom_type,
	parse_description,
	parse_name,
	parse_parameter_list,
)


def test_parse_name_forms():
	assert parse_name("User") == "User"
	assert parse_name("name # the user's name") == "name"
	assert parse_name("greet(s name)") == "greet"
	assert parse_name("App.Models") == "App.Models"
	assert parse_name("List<int> myList") == "myList"


def test_parse_name_defaults_to_empty():
	assert parse_name("") == ""
	assert parse_name("(") == ""


def test_parse_description():
	assert parse_description("name # the user's name") == "the user's name"
	assert parse_description("greet(s a) # says hi") == "says hi"
	assert parse_description("name") == "TODO"


def test_parse_custom_type():
	assert parse_custom_type("List<int> myList") == "List<int>"
	assert parse_custom_type("Foo bar(i x)") == "Foo"
	assert parse_custom_type("myList") == "var"
	assert parse_custom_type("int[] nums") == "var"


def test_is_method():
	assert is_method("greet()")
	assert is_method("greet(s name) # hi")
	assert not is_method("name # (unfinished")
	assert not is_method("name")


def test_is_private_token():
	assert is_private_token("_Foo bar")
	assert not is_private_token("Foo bar")
	assert not is_private_token("_ bar")


def test_parameter_list_segments():
	assert parse_parameter_list("greet()") == []
	assert parse_parameter_list("greet(s name)") == ["s name"]
	assert parse_parameter_list("add(i a, i b, Foo c)") == ["i a", "i b", "Foo c"]


def test_parameter_list_spans_first_to_last_paren():
	assert parse_parameter_list("run(Func<(i)> f)") == ["Func<(i)> f"]


def test_unbalanced_parameter_list_raises():
	with pytest.raises(MalformedParameterListError) as info:
		parse_parameter_list("greet((s name)")
	assert info.value.code == "MALFORMED_PARAMETERS"
	assert info.value.text == "greet((s name)"


def test_misordered_parentheses_raise():
	with pytest.raises(MalformedParameterListError):
		parse_parameter_list("greet(s a)) (")
	with pytest.raises(MalformedParameterListError):
		parse_parameter_list("greet)s a(")


def test_line_without_parentheses_raises():
	with pytest.raises(MalformedParameterListError):
		parse_parameter_list("greet")
