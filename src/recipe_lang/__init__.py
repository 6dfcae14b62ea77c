"""Recipe Lang - Scanner and parser for a small recipe language."""

__version__ = "0.1.0"

import pathlib
from typing import Union

from . import errors, parsing, recipes, scanning, vocabulary
from .errors import ParseError, RecipeLangError, ScanError
from .parsing import parse
from .recipes import Recipe
from .scanning import scan


def interpret(source_text: str) -> Recipe:
    """Scan and parse recipe source text.

    Args:
        source_text: Complete recipe source.

    Returns:
        The parsed Recipe.

    Raises:
        ScanError: If the text cannot be tokenized.
        ParseError: If the tokens do not form a valid recipe.
    """
    return parse(scan(source_text))


def read_source(path: Union[str, pathlib.Path]) -> str:
    """Read a recipe file as UTF-8 text."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_recipe(path: Union[str, pathlib.Path]) -> Recipe:
    """Read a UTF-8 recipe file and parse it.

    Raises:
        OSError: If the file cannot be read.
        ScanError: If the text cannot be tokenized.
        ParseError: If the tokens do not form a valid recipe.
    """
    return interpret(read_source(path))


__all__ = [
    "errors",
    "parsing",
    "recipes",
    "scanning",
    "vocabulary",
    "interpret",
    "load_recipe",
    "read_source",
    "parse",
    "scan",
    "Recipe",
    "RecipeLangError",
    "ScanError",
    "ParseError",
]
