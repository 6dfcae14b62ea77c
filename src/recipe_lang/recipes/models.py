"""Data model handed from the parser to whatever bakes the recipe.

Every value here is immutable. Instructions never hold ingredient data:
an IngredientReference is an index into ``Recipe.ingredients`` plus the
declared name, and RESULT stands for the dish assembled so far.
"""

import dataclasses
from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

from recipe_lang.vocabulary.units import IngredientUnit, TemperatureUnit, TimeUnit


@dataclasses.dataclass(frozen=True)
class Amount:
    quantity: float
    unit: IngredientUnit = IngredientUnit.UNITS


@dataclasses.dataclass(frozen=True)
class Temperature:
    degrees: float
    unit: TemperatureUnit


@dataclasses.dataclass(frozen=True)
class Time:
    duration: float
    unit: TimeUnit


@dataclasses.dataclass(frozen=True)
class IngredientKey:
    """Case-insensitive identity of an ingredient name.

    Build it with :meth:`of` so declaration and lookup normalise the same way.
    """

    folded: str

    @classmethod
    def of(cls, name: str) -> "IngredientKey":
        return cls(name.casefold())


@dataclasses.dataclass(frozen=True, eq=False)
class Ingredient:
    """A declared ingredient. ``Egg`` and ``egg`` are the same ingredient."""

    name: str
    amount: Amount

    @property
    def key(self) -> IngredientKey:
        return IngredientKey.of(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


# --- References ---


@dataclasses.dataclass(frozen=True)
class ResultReference:
    """The ``result`` sentinel: the dish as assembled so far."""

    def __repr__(self) -> str:
        return "RESULT"


RESULT = ResultReference()


@dataclasses.dataclass(frozen=True)
class IngredientReference:
    index: int
    name: str


Reference = Union[ResultReference, IngredientReference]


# --- Instructions ---


@dataclasses.dataclass(frozen=True)
class Combine:
    """``Combine a, b`` or ``Mix a, b``."""

    ingredients: Tuple[Reference, ...]


@dataclasses.dataclass(frozen=True)
class CutInto:
    source: Reference
    destination: Reference


@dataclasses.dataclass(frozen=True)
class Refridgerate:
    ingredient: Reference
    time: Time


@dataclasses.dataclass(frozen=True)
class Bake:
    ingredient: Reference
    temperature: Temperature
    time: Time


Instruction = Union[Combine, CutInto, Refridgerate, Bake]


@dataclasses.dataclass(frozen=True, eq=False)
class Recipe:
    """A parsed recipe.

    Two recipes are equal when they declare the same names with the same
    amounts and list the same instructions. Unlike Ingredient, this compares
    amounts and the exact spelling of each name.

    Attributes:
        ingredients: Declared ingredients in declaration order. Names are
            unique ignoring case.
        instructions: Instructions in source order.
    """

    ingredients: Tuple[Ingredient, ...]
    instructions: Tuple[Instruction, ...]

    def _contents(self) -> Tuple[Any, ...]:
        return (
            tuple((i.name, i.amount) for i in self.ingredients),
            self.instructions,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self._contents() == other._contents()

    def __hash__(self) -> int:
        return hash(self._contents())

    def ingredient(self, reference: Reference) -> Optional[Ingredient]:
        """Return the ingredient a reference points at, or None for RESULT."""
        if isinstance(reference, ResultReference):
            return None
        return self.ingredients[reference.index]

    def find(self, name: str) -> Optional[Ingredient]:
        """Look up a declared ingredient by name, ignoring case."""
        key = IngredientKey.of(name)
        for ingredient in self.ingredients:
            if ingredient.key == key:
                return ingredient
        return None

    def ingredient_set(self) -> FrozenSet[Ingredient]:
        return frozenset(self.ingredients)

    def to_dict(self) -> Dict[str, Any]:
        """Plain structure suitable for ``json.dumps``."""
        return {
            "ingredients": [
                {
                    "name": ingredient.name,
                    "quantity": ingredient.amount.quantity,
                    "unit": ingredient.amount.unit.name.lower(),
                }
                for ingredient in self.ingredients
            ],
            "instructions": [
                _instruction_to_dict(instruction) for instruction in self.instructions
            ],
        }


def _reference_name(reference: Reference) -> str:
    if isinstance(reference, ResultReference):
        return "result"
    return reference.name


def _instruction_to_dict(instruction: Instruction) -> Dict[str, Any]:
    if isinstance(instruction, Combine):
        return {
            "action": "combine",
            "ingredients": [_reference_name(r) for r in instruction.ingredients],
        }
    if isinstance(instruction, CutInto):
        return {
            "action": "cut_into",
            "source": _reference_name(instruction.source),
            "destination": _reference_name(instruction.destination),
        }
    if isinstance(instruction, Refridgerate):
        return {
            "action": "refridgerate",
            "ingredient": _reference_name(instruction.ingredient),
            "time": {
                "duration": instruction.time.duration,
                "unit": instruction.time.unit.name.lower(),
            },
        }
    return {
        "action": "bake",
        "ingredient": _reference_name(instruction.ingredient),
        "temperature": {
            "degrees": instruction.temperature.degrees,
            "unit": instruction.temperature.unit.name.lower(),
        },
        "time": {
            "duration": instruction.time.duration,
            "unit": instruction.time.unit.name.lower(),
        },
    }
