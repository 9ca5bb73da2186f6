"""Tests for value literals and definitions."""

from screenplayer.parser import (
    Definition,
    Err,
    Ok,
    Source,
    parse_definition,
    parse_value,
)


class TestParseValue:
    """Test `{...}` literal parsing."""

    def test_parse_string_value(self):
        """A single part is a trimmed scalar and the literal is consumed."""
        source = Source("{string}")
        result = parse_value(source)

        assert isinstance(result, Ok)
        value, rest = result.value
        assert value == "string"
        assert rest.line == source.line
        assert rest.offset == len(source.chars)
        assert rest.chars == ""

    def test_parse_value_trims_scalar(self):
        """Surrounding whitespace inside the brackets is dropped."""
        value, rest = parse_value(Source("{  spaced out  } tail")).value

        assert value == "spaced out"
        assert rest.chars == " tail"
        assert rest.offset == len("{  spaced out  }")

    def test_parse_list_value(self):
        """Semicolons split the literal into a list of trimmed parts."""
        source = Source("{string1; string2}")
        value, rest = parse_value(source).value

        assert value == ["string1", "string2"]
        assert rest.offset == len(source.chars)
        assert rest.chars == ""

    def test_parse_empty_value(self):
        """An empty literal is the empty string."""
        value, _ = parse_value(Source("{}")).value

        assert value == ""

    def test_unterminated_value(self):
        """A missing `}` points at the end of the input."""
        source = Source("{missing")
        result = parse_value(source)

        assert isinstance(result, Err)
        assert result.error.message == "expected }, but found undefined"
        assert result.error.offset == len(source.chars)
        assert result.error.line == source.line

    def test_unterminated_value_uses_absolute_offset(self):
        """The end offset includes the cursor's own offset."""
        result = parse_value(Source("{abc", offset=10))

        assert result.error.offset == 14

    def test_value_requires_left_bracket(self):
        """Anything but `{` is an unexpected sigil at the cursor."""
        result = parse_value(Source("x}", offset=3))

        assert isinstance(result, Err)
        assert result.error.message == "expected {, but found x"
        assert result.error.offset == 3

    def test_value_at_end_of_input(self):
        """An exhausted cursor reports undefined."""
        result = parse_value(Source(""))

        assert result.error.message == "expected {, but found undefined"


class TestParseDefinition:
    """Test `${name}={value}` parsing."""

    def test_parse_string_definition(self):
        """A scalar definition consumes the whole input."""
        source = Source("${var}={string}")
        result = parse_definition(source)

        assert isinstance(result, Ok)
        definition, rest = result.value
        assert definition == Definition(name="var", value="string")
        assert rest.offset == source.offset + len(source.chars)
        assert rest.chars == ""

    def test_parse_list_definition(self):
        """The value may be a list."""
        source = Source("${var}={stringA; stringB}")
        definition, rest = parse_definition(source).value

        assert definition.name == "var"
        assert definition.value == ["stringA", "stringB"]
        assert rest.chars == ""

    def test_definition_allows_spaces_around_assignment(self):
        """Whitespace between the name, `=` and the value is skipped."""
        definition, rest = parse_definition(Source("${a} = {b}\nnext")).value

        assert definition == Definition(name="a", value="b")
        assert rest.chars == "\nnext"

    def test_missing_assignment(self):
        """The actual next character is reported at its offset."""
        source = Source("${string}a")
        result = parse_definition(source)

        assert isinstance(result, Err)
        assert result.error.message == "expected =, but found a"
        assert result.error.offset == source.chars.index("a")
        assert result.error.line == source.line

    def test_missing_assignment_at_end_of_input(self):
        """An input ending after the name reports undefined."""
        result = parse_definition(Source("${name}"))

        assert result.error.message == "expected =, but found undefined"
        assert result.error.offset == len("${name}")

    def test_list_name_is_rejected(self):
        """A definition name must be a scalar."""
        result = parse_definition(Source("${a; b}={c}"))

        assert isinstance(result, Err)
        assert result.error.message == "variable can't be defined as list"
        assert result.error.offset == 0

    def test_definition_requires_dollar(self):
        """The definition sigil is mandatory."""
        result = parse_definition(Source("{a}={b}"))

        assert result.error.message == "expected $, but found {"

    def test_unterminated_definition_value(self):
        """Errors from the value literal propagate unchanged."""
        source = Source("${a}={b")
        result = parse_definition(source)

        assert result.error.message == "expected }, but found undefined"
        assert result.error.offset == len(source.chars)
