"""The symbol table of declared ingredients."""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from recipe_lang.errors import DuplicateIngredientError
from recipe_lang.recipes.models import Amount, Ingredient, IngredientKey

logger = logging.getLogger(__name__)


class MiseEnPlace:
    """Append-only table of ingredients, keyed by name ignoring case.

    Ingredients are stored in declaration order; references produced while
    parsing are indexes into that order, so the table can be handed to a
    Recipe as-is.
    """

    def __init__(self):
        self._ingredients: List[Ingredient] = []
        self._index: Dict[IngredientKey, int] = {}

    def declare(self, name: str, amount: Amount, token: Any = None) -> int:
        """Add an ingredient and return its index.

        Raises:
            DuplicateIngredientError: If the name is already declared, in any case.
        """
        key = IngredientKey.of(name)
        if key in self._index:
            raise DuplicateIngredientError(name, token)
        index = len(self._ingredients)
        self._ingredients.append(Ingredient(name, amount))
        self._index[key] = index
        logger.debug(
            f"Declared ingredient {name!r}: "
            f"{amount.quantity:g} {amount.unit.name.lower()}"
        )
        return index

    def resolve(self, name: str) -> Optional[int]:
        """Return the index of a declared ingredient, or None."""
        return self._index.get(IngredientKey.of(name))

    def get(self, index: int) -> Ingredient:
        return self._ingredients[index]

    def ingredients(self) -> Tuple[Ingredient, ...]:
        return tuple(self._ingredients)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and IngredientKey.of(name) in self._index

    def __len__(self) -> int:
        return len(self._ingredients)

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(self._ingredients)
