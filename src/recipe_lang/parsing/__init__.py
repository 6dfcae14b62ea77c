"""Parsing of scanned recipe tokens into the Recipe AST."""

from .mise_en_place import MiseEnPlace
from .parser import Parser, parse

__all__ = ["MiseEnPlace", "Parser", "parse"]
