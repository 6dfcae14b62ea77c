import pytest

from recipe_lang import interpret
from recipe_lang.errors import (
    IllegalCharacterError,
    ParseError,
    RecipeLangError,
    ScanError,
    UnexpectedEndOfInputError,
    UnitParseError,
    UnknownIdentifierError,
)

SOURCE = """Ingredients:
flour: 2 cups

Instructions:
Combine flour
Bake butter 350 F 45 min
"""


def test_parse_error_render_points_at_token():
    with pytest.raises(UnknownIdentifierError) as excinfo:
        interpret(SOURCE)
    error = excinfo.value
    assert str(error) == "line 6, column 6: unknown ingredient 'butter'"
    assert error.render(SOURCE) == (
        "line 6, column 6: unknown ingredient 'butter'\n"
        "Bake butter 350 F 45 min\n"
        "     ^"
    )


def test_parse_error_render_without_source():
    with pytest.raises(UnknownIdentifierError) as excinfo:
        interpret(SOURCE)
    assert excinfo.value.render() == "line 6, column 6: unknown ingredient 'butter'"


def test_scan_error_carries_its_own_line():
    with pytest.raises(IllegalCharacterError) as excinfo:
        interpret("Ingredients:\nflour: 2 cups!\n")
    assert excinfo.value.render() == (
        "line 2, column 14: unexpected character '!'\n"
        "flour: 2 cups!\n"
        "             ^"
    )


def test_render_keeps_tabs_aligned():
    with pytest.raises(ScanError) as excinfo:
        interpret("Ingredients:\nx\t!")
    assert excinfo.value.render().splitlines()[-1] == " \t^"


def test_end_of_input_has_no_position():
    with pytest.raises(UnexpectedEndOfInputError) as excinfo:
        interpret("Ingredients:\nflour: 2 cups\n")
    error = excinfo.value
    assert error.line is None
    assert error.render(SOURCE) == (
        "expected ingredient name or 'Instructions', found end of input"
    )


def test_unit_error_lists_accepted_spellings():
    with pytest.raises(UnitParseError) as excinfo:
        interpret("Ingredients:\ncake: 1\nInstructions:\nBake cake 350 K 1 hr")
    assert str(excinfo.value) == (
        "line 4, column 15: unknown unit 'K' (expected one of: F, C)"
    )


def test_unexpected_token_message():
    with pytest.raises(ParseError) as excinfo:
        interpret("Ingredients: flour")
    assert str(excinfo.value) == (
        "line 1, column 14: expected end of line, found identifier 'flour'"
    )


@pytest.mark.parametrize(
    "source_text, error_family",
    [
        ("Ingredients:\n@", ScanError),
        ("Ingredients:\negg: 1.2.3\n", ScanError),
        ("Ingredients", ParseError),
        ("Ingredients:\nInstructions:\nBake x 1 F 1 s", ParseError),
    ],
)
def test_error_families(source_text, error_family):
    """Test that every failure is one of the two families under RecipeLangError."""
    with pytest.raises(error_family) as excinfo:
        interpret(source_text)
    assert isinstance(excinfo.value, RecipeLangError)
