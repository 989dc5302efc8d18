"""
Recipe data models for the Cooklang converter.

This module defines the Pydantic models used to hold a parsed Cooklang
recipe: its metadata, its steps (ordered nodes of text, ingredients,
cookware and timers) and its shopping lists.
"""
from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# A resolved quantity is either numeric or literal text
Quantity = Union[float, str]


class TextNode(BaseModel):
    """A run of literal step text."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    value: str = Field(
        description="The literal text, exactly as it appeared in the line"
    )


class IngredientNode(BaseModel):
    """An ingredient referenced inside a step.

    Attributes:
        name: The name of the ingredient (e.g., 'salt', 'apple juice')
        quantity: Numeric or literal quantity (e.g., 1.5, 'some')
        units: Optional units (e.g., 'cups', 'tsp')
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["ingredient"] = "ingredient"
    name: str = Field(
        description="The name of the ingredient, e.g., 'apple juice'"
    )
    quantity: Quantity | None = Field(
        default=None,
        description="The quantity, e.g., 1.5 or 'some'"
    )
    units: str | None = Field(
        default=None,
        description="The units of the quantity, e.g., 'cups', 'tsp'"
    )


class CookwareNode(BaseModel):
    """A piece of cookware referenced inside a step.

    Attributes:
        name: The name of the cookware (e.g., 'pot', 'frying pan')
        quantity: Optional numeric or literal quantity
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["cookware"] = "cookware"
    name: str = Field(
        description="The name of the cookware, e.g., 'frying pan'"
    )
    quantity: Quantity | None = Field(
        default=None,
        description="How many are needed, e.g., 2"
    )


class TimerNode(BaseModel):
    """A timer referenced inside a step.

    Attributes:
        name: Optional timer name (e.g., 'boil')
        quantity: Optional numeric or literal duration
        units: Optional units of the duration (e.g., 'minutes')
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["timer"] = "timer"
    name: str | None = Field(
        default=None,
        description="The name of the timer, e.g., 'boil'"
    )
    quantity: Quantity | None = Field(
        default=None,
        description="The duration, e.g., 25"
    )
    units: str | None = Field(
        default=None,
        description="The units of the duration, e.g., 'minutes'"
    )


Node = Annotated[
    Union[TextNode, IngredientNode, CookwareNode, TimerNode],
    Field(discriminator="type"),
]

# A step is the ordered sequence of nodes of one source line
Step = list[Node]


class ShoppingListItem(BaseModel):
    """A single entry of a shopping list category."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="The item name, e.g., 'apple'")
    synonym: str = Field(
        default="",
        description="An alternative name, e.g., 'Granny Smith'"
    )


class Recipe(BaseModel):
    """The top-level model for a parsed Cooklang recipe.

    Attributes:
        metadata: Recipe metadata declared with '>> key: value' lines
        steps: The recipe steps, one per non-blank source line
        shopping_list: Shopping list items grouped by category
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    metadata: dict[str, str] = Field(
        default_factory=dict,
        description="Metadata keys and their values, e.g., {'servings': '2'}"
    )
    steps: list[Step] = Field(
        default_factory=list,
        description="A list of steps, each an ordered list of nodes"
    )
    shopping_list: dict[str, list[ShoppingListItem]] = Field(
        default_factory=dict,
        alias="shoppingList",
        description="Shopping list categories and their items"
    )

    @classmethod
    def from_cooklang(cls, source: str = "") -> Recipe:
        """Create a recipe from a Cooklang string.

        Args:
            source: The Cooklang text; an empty string gives an empty recipe

        Returns:
            The parsed Recipe
        """
        if not source:
            return cls()

        from ..parsers.cooklang_parser import parse

        return parse(source)

    def to_cooklang(self) -> str:
        """Render the recipe back to Cooklang markup.

        Comments are not preserved and fractional quantities come back as
        their numeric value.
        """
        from ..services.serializer import serialize

        return serialize(self)

    def to_json(self, indent: int | None = None) -> str:
        """Render the recipe as a JSON document with camelCase keys."""
        return self.model_dump_json(
            by_alias=True,
            exclude_none=True,
            indent=indent,
        )
