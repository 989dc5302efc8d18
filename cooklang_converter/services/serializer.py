"""
Cooklang Serializer.

This module renders a Recipe back to canonical Cooklang markup. Comments
are not preserved, and a fractional quantity comes back as its numeric
value ('1/2' is written as '0.5').
"""
from __future__ import annotations

import logging

from ..const import (
    METADATA_PREFIX,
    SIGILS,
    SYNONYM_SEPARATOR,
    UNITS_SEPARATOR,
)
from ..models.recipe import (
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

_LOGGER = logging.getLogger(__name__)


def format_quantity(quantity: Quantity | None) -> str:
    """
    Format a quantity in canonical form.

    Args:
        quantity: A numeric or literal quantity (or None)

    Returns:
        Formatted string (empty string if quantity is None)

    Examples:
        >>> format_quantity(2.0)
        '2'
        >>> format_quantity(0.5)
        '0.5'
        >>> format_quantity('some')
        'some'
    """
    if quantity is None:
        return ""

    if isinstance(quantity, str):
        return quantity

    # Whole numbers are written without decimals
    if quantity == int(quantity):
        return str(int(quantity))

    return repr(float(quantity))


def serialize_node(node: Node) -> str:
    """Render a single step node."""
    if isinstance(node, TextNode):
        return node.value

    if isinstance(node, IngredientNode):
        name, units = node.name, node.units
    elif isinstance(node, CookwareNode):
        name, units = node.name, None
    elif isinstance(node, TimerNode):
        name, units = node.name or "", node.units
    else:
        raise TypeError(f"Cannot serialize node of type {type(node).__name__}")

    parts = [SIGILS[node.type], name, "{"]
    if node.quantity is not None:
        parts.append(format_quantity(node.quantity))
    if units:
        parts.append(UNITS_SEPARATOR + units)
    parts.append("}")

    return "".join(parts)


def serialize_step(step: Step) -> str:
    """Render a step as one line."""
    return "".join(serialize_node(node) for node in step)


def serialize_shopping_list_item(item: ShoppingListItem) -> str:
    """Render a shopping list item as 'name' or 'name|synonym'."""
    if item.synonym:
        return item.name + SYNONYM_SEPARATOR + item.synonym
    return item.name


def serialize(recipe: Recipe) -> str:
    """Render a Recipe to canonical Cooklang markup.

    Args:
        recipe: The recipe to render

    Returns:
        Metadata lines, then steps, then shopping list categories, with a
        blank line between blocks, between steps and between categories
    """
    blocks = []

    if recipe.metadata:
        blocks.append("\n".join(
            f"{METADATA_PREFIX} {key}: {value}"
            for key, value in recipe.metadata.items()
        ))

    if recipe.steps:
        blocks.append("\n\n".join(
            serialize_step(step) for step in recipe.steps))

    if recipe.shopping_list:
        categories = []
        for category, items in recipe.shopping_list.items():
            lines = [f"[{category}]"]
            lines.extend(serialize_shopping_list_item(item) for item in items)
            categories.append("\n".join(lines))
        blocks.append("\n\n".join(categories))

    _LOGGER.debug(
        "Serialized recipe with %d metadata entries, %d steps and %d shopping list categories",
        len(recipe.metadata), len(recipe.steps), len(recipe.shopping_list))

    return "\n\n".join(blocks) + "\n" if blocks else ""
