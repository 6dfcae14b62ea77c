"""Unit vocabulary for ingredient amounts, oven temperatures and times."""

import enum
from typing import Dict, List

from recipe_lang.errors import UnitParseError


class IngredientUnit(enum.Enum):
    """Units an ingredient amount can be measured in.

    ``UNITS`` is the implicit unit of a bare count (``egg: 3``) and has no
    spelling of its own.
    """

    GRAMS = "g"
    OUNCES = "oz"
    CUPS = "cup"
    TEASPOONS = "tsp"
    TABLESPOONS = "tbsp"
    UNITS = ""

    def aliases(self) -> List[str]:
        return _aliases_of(INGREDIENT_UNIT_LOOKUP, self)


class TemperatureUnit(enum.Enum):
    FAHRENHEIT = "F"
    CELSIUS = "C"

    def aliases(self) -> List[str]:
        return _aliases_of(TEMPERATURE_UNIT_LOOKUP, self)


class TimeUnit(enum.Enum):
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "hr"

    def aliases(self) -> List[str]:
        return _aliases_of(TIME_UNIT_LOOKUP, self)


# --- Lookup tables ---

# Spellings are case-sensitive: "F" is Fahrenheit, "f" is nothing.
INGREDIENT_UNIT_LOOKUP: Dict[str, IngredientUnit] = {
    "g": IngredientUnit.GRAMS,
    "oz": IngredientUnit.OUNCES,
    "cup": IngredientUnit.CUPS,
    "cups": IngredientUnit.CUPS,
    "tsp": IngredientUnit.TEASPOONS,
    "tbsp": IngredientUnit.TABLESPOONS,
}

TEMPERATURE_UNIT_LOOKUP: Dict[str, TemperatureUnit] = {
    "F": TemperatureUnit.FAHRENHEIT,
    "C": TemperatureUnit.CELSIUS,
}

TIME_UNIT_LOOKUP: Dict[str, TimeUnit] = {
    "s": TimeUnit.SECONDS,
    "min": TimeUnit.MINUTES,
    "mins": TimeUnit.MINUTES,
    "hr": TimeUnit.HOURS,
    "hrs": TimeUnit.HOURS,
}


def _aliases_of(lookup: Dict[str, enum.Enum], unit: enum.Enum) -> List[str]:
    return [spelling for spelling, variant in lookup.items() if variant is unit]


# --- Functions ---


def parse_ingredient_unit(raw: str) -> IngredientUnit:
    """Resolve an amount unit token such as ``cups`` or ``tbsp``.

    ``IngredientUnit.UNITS`` is never returned here: it only applies when a
    declaration has no unit token at all.

    Args:
        raw: The unit token exactly as it appeared in the source.

    Returns:
        The matching IngredientUnit.

    Raises:
        UnitParseError: If ``raw`` is not a known spelling.

    Examples:
        >>> parse_ingredient_unit("cups")
        <IngredientUnit.CUPS: 'cup'>
    """
    try:
        return INGREDIENT_UNIT_LOOKUP[raw]
    except KeyError:
        raise UnitParseError(raw) from None


def parse_temperature_unit(raw: str) -> TemperatureUnit:
    """Resolve a temperature unit token (``F`` or ``C``)."""
    try:
        return TEMPERATURE_UNIT_LOOKUP[raw]
    except KeyError:
        raise UnitParseError(raw) from None


def parse_time_unit(raw: str) -> TimeUnit:
    """Resolve a time unit token such as ``min`` or ``hrs``."""
    try:
        return TIME_UNIT_LOOKUP[raw]
    except KeyError:
        raise UnitParseError(raw) from None
