"""Keywords and unit vocabulary of the recipe language."""

from .keywords import KEYWORD_LOOKUP, RESULT_IDENTIFIER, Keyword, lookup_keyword
from .units import (
    INGREDIENT_UNIT_LOOKUP,
    TEMPERATURE_UNIT_LOOKUP,
    TIME_UNIT_LOOKUP,
    IngredientUnit,
    TemperatureUnit,
    TimeUnit,
    parse_ingredient_unit,
    parse_temperature_unit,
    parse_time_unit,
)

__all__ = [
    "Keyword",
    "KEYWORD_LOOKUP",
    "RESULT_IDENTIFIER",
    "lookup_keyword",
    "IngredientUnit",
    "TemperatureUnit",
    "TimeUnit",
    "INGREDIENT_UNIT_LOOKUP",
    "TEMPERATURE_UNIT_LOOKUP",
    "TIME_UNIT_LOOKUP",
    "parse_ingredient_unit",
    "parse_temperature_unit",
    "parse_time_unit",
]
