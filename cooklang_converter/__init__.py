"""
Cooklang Converter.

Converts Cooklang recipe markup into a structured Recipe model and renders
a Recipe back to canonical markup.
"""
from __future__ import annotations

from .models.recipe import (
    CookwareNode,
    IngredientNode,
    Recipe,
    ShoppingListItem,
    TextNode,
    TimerNode,
)
from .parsers.cooklang_parser import CooklangParser, parse
from .services.image_url import get_image_url
from .services.serializer import serialize

__all__ = [
    "CooklangParser",
    "CookwareNode",
    "IngredientNode",
    "Recipe",
    "ShoppingListItem",
    "TextNode",
    "TimerNode",
    "get_image_url",
    "parse",
    "serialize",
]
