"""Parsers package."""
from .base_parser import BaseRecipeParser
from .cooklang_parser import CooklangParser, parse
from .quantity import parse_quantity, parse_units

__all__ = [
    "BaseRecipeParser",
    "CooklangParser",
    "parse",
    "parse_quantity",
    "parse_units",
]
