import pytest

from recipe_lang import interpret, load_recipe, read_source
from recipe_lang.errors import NumberParseError, UnknownIdentifierError

CAKE = """Ingredients:
flour: 2 cups
egg: 3

Instructions:
Combine flour, egg
Bake result 350 F 45 min
"""


def test_load_recipe(tmp_path):
    path = tmp_path / "cake.recipe"
    path.write_text(CAKE, encoding="utf-8")
    assert load_recipe(path) == interpret(CAKE)
    assert load_recipe(str(path)) == interpret(CAKE)


def test_load_recipe_scan_error(tmp_path):
    path = tmp_path / "bad_number.recipe"
    path.write_text("Ingredients:\negg: 1.2.3\n", encoding="utf-8")
    with pytest.raises(NumberParseError) as excinfo:
        load_recipe(path)
    assert (excinfo.value.line, excinfo.value.column) == (2, 6)


def test_load_recipe_parse_error(tmp_path):
    path = tmp_path / "no_butter.recipe"
    path.write_text(CAKE.replace("Bake result", "Bake butter"), encoding="utf-8")
    with pytest.raises(UnknownIdentifierError) as excinfo:
        load_recipe(path)
    assert excinfo.value.name == "butter"


def test_load_recipe_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_recipe(tmp_path / "missing.recipe")


def test_read_source_keeps_text(tmp_path):
    """Test that the file is decoded as UTF-8 with universal newlines."""
    path = tmp_path / "creme.recipe"
    path.write_bytes("Ingredients:\ncrème fraîche: 1 cup\r\n".encode("utf-8"))
    assert read_source(path) == "Ingredients:\ncrème fraîche: 1 cup\n"
