"""Models package."""
from .recipe import (
    CookwareNode,
    IngredientNode,
    Node,
    Quantity,
    Recipe,
    ShoppingListItem,
    Step,
    TextNode,
    TimerNode,
)

__all__ = [
    "CookwareNode",
    "IngredientNode",
    "Node",
    "Quantity",
    "Recipe",
    "ShoppingListItem",
    "Step",
    "TextNode",
    "TimerNode",
]
