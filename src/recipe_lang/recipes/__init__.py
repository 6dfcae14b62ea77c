"""Recipe AST models."""

from .models import (
    RESULT,
    Amount,
    Bake,
    Combine,
    CutInto,
    Ingredient,
    IngredientKey,
    IngredientReference,
    Instruction,
    Recipe,
    Reference,
    Refridgerate,
    ResultReference,
    Temperature,
    Time,
)

__all__ = [
    "Amount",
    "Temperature",
    "Time",
    "IngredientKey",
    "Ingredient",
    "RESULT",
    "ResultReference",
    "IngredientReference",
    "Reference",
    "Combine",
    "CutInto",
    "Refridgerate",
    "Bake",
    "Instruction",
    "Recipe",
]
