from __future__ import annotations

import unittest

from cooklang_converter import IngredientNode, ShoppingListItem, TextNode, parse
from cooklang_converter.parsers.cooklang_parser import (
    extract_shopping_lists,
    parse_shopping_list_items,
)


class ShoppingListItemsTests(unittest.TestCase):
    def test_name_and_synonym(self) -> None:
        items = parse_shopping_list_items("\n apple | Granny Smith \n\nbanana\n")
        self.assertEqual(items, [
            ShoppingListItem(name="apple", synonym="Granny Smith"),
            ShoppingListItem(name="banana", synonym=""),
        ])

    def test_splits_on_first_pipe_only(self) -> None:
        items = parse_shopping_list_items("a|b|c")
        self.assertEqual(items, [ShoppingListItem(name="a", synonym="b|c")])


class ExtractShoppingListsTests(unittest.TestCase):
    def test_block_is_extracted_and_removed(self) -> None:
        remaining, shopping_list = extract_shopping_lists(
            "[fruit]\napple|Granny Smith\nbanana\n\n")
        self.assertEqual(shopping_list, {
            "fruit": [
                ShoppingListItem(name="apple", synonym="Granny Smith"),
                ShoppingListItem(name="banana", synonym=""),
            ],
        })
        self.assertEqual(remaining.strip(), "")

    def test_category_is_trimmed(self) -> None:
        _, shopping_list = extract_shopping_lists("  [ veg ]  \n carrot \n")
        self.assertEqual(shopping_list, {"veg": [ShoppingListItem(name="carrot")]})

    def test_block_ends_at_blank_line(self) -> None:
        remaining, shopping_list = extract_shopping_lists(
            "[dairy]\nmilk\n\nPour the milk.")
        self.assertEqual(shopping_list, {"dairy": [ShoppingListItem(name="milk")]})
        self.assertEqual(remaining, "\n\nPour the milk.")

    def test_header_without_items(self) -> None:
        _, shopping_list = extract_shopping_lists("[empty]")
        self.assertEqual(shopping_list, {"empty": []})

    def test_duplicate_category_last_wins(self) -> None:
        _, shopping_list = extract_shopping_lists("[fruit]\napple\n\n[fruit]\npear\n")
        self.assertEqual(shopping_list, {"fruit": [ShoppingListItem(name="pear")]})

    def test_categories_keep_order(self) -> None:
        _, shopping_list = extract_shopping_lists(
            "[fruit]\napple\n\n[dairy]\nmilk|whole milk\n")
        self.assertEqual(list(shopping_list), ["fruit", "dairy"])
        self.assertEqual(
            shopping_list["dairy"],
            [ShoppingListItem(name="milk", synonym="whole milk")],
        )


class ParseShoppingListTests(unittest.TestCase):
    def test_block_content_is_not_step_text(self) -> None:
        recipe = parse("[fruit]\napple|Granny Smith\nbanana\n\n")
        self.assertEqual(recipe.steps, [])
        self.assertEqual(recipe.shopping_list["fruit"], [
            ShoppingListItem(name="apple", synonym="Granny Smith"),
            ShoppingListItem(name="banana", synonym=""),
        ])

    def test_steps_and_shopping_list(self) -> None:
        recipe = parse("Slice the @apple{1}.\n\n[fruit]\napple\n")
        self.assertEqual(recipe.steps, [[
            TextNode(value="Slice the "),
            IngredientNode(name="apple", quantity=1.0),
            TextNode(value="."),
        ]])
        self.assertEqual(recipe.shopping_list, {"fruit": [ShoppingListItem(name="apple")]})

    def test_inline_brackets_are_step_text(self) -> None:
        recipe = parse("Add [optional] @salt")
        self.assertEqual(recipe.shopping_list, {})
        self.assertEqual(recipe.steps, [[
            TextNode(value="Add [optional] "),
            IngredientNode(name="salt", quantity="some"),
        ]])


if __name__ == "__main__":
    unittest.main()
