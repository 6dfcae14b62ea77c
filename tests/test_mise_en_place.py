import pytest

from recipe_lang.errors import DuplicateIngredientError
from recipe_lang.parsing import MiseEnPlace
from recipe_lang.recipes import Amount, Ingredient
from recipe_lang.vocabulary import IngredientUnit


@pytest.fixture
def mise_en_place():
    table = MiseEnPlace()
    table.declare("Flour", Amount(2.0, IngredientUnit.CUPS))
    table.declare("olive oil", Amount(1.0, IngredientUnit.TABLESPOONS))
    return table


def test_declare_returns_indexes_in_order():
    table = MiseEnPlace()
    assert table.declare("a", Amount(1.0)) == 0
    assert table.declare("b", Amount(2.0)) == 1
    assert [ingredient.name for ingredient in table] == ["a", "b"]


@pytest.mark.parametrize(
    "name, expected_index",
    [
        ("Flour", 0),
        ("flour", 0),
        ("FLOUR", 0),
        ("Olive Oil", 1),
        ("olive", None),
        ("butter", None),
    ],
)
def test_resolve(mise_en_place, name, expected_index):
    """Test that lookups ignore case and never match partial names."""
    assert mise_en_place.resolve(name) == expected_index


def test_resolve_does_not_modify_table(mise_en_place):
    mise_en_place.resolve("butter")
    assert len(mise_en_place) == 2
    assert "butter" not in mise_en_place


def test_duplicate_names_are_rejected(mise_en_place):
    with pytest.raises(DuplicateIngredientError) as excinfo:
        mise_en_place.declare("FLOUR", Amount(5.0, IngredientUnit.GRAMS))
    assert excinfo.value.name == "FLOUR"
    # The original declaration is untouched
    assert mise_en_place.get(0).amount == Amount(2.0, IngredientUnit.CUPS)


def test_ingredients_snapshot(mise_en_place):
    ingredients = mise_en_place.ingredients()
    assert ingredients == (
        Ingredient("Flour", Amount(2.0, IngredientUnit.CUPS)),
        Ingredient("olive oil", Amount(1.0, IngredientUnit.TABLESPOONS)),
    )
    mise_en_place.declare("egg", Amount(3.0))
    assert len(ingredients) == 2


def test_contains_only_strings(mise_en_place):
    assert "flour" in mise_en_place
    assert 0 not in mise_en_place
