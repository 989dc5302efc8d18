"""
Cooklang Recipe Parser.

This module converts Cooklang markup into a structured Recipe. Parsing runs
in stages: comments are stripped, shopping-list blocks are extracted and
removed, and every remaining non-blank line is tokenized into a step of
text, ingredient, cookware and timer nodes. Parsing never fails; anything
the grammar does not recognize is kept as literal text.

Lines are scanned left to right over the positions where a grammar rule can
start. Rules only ever look forward for the next delimiter, so a line is
tokenized in time proportional to its length.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from ..const import (
    BLOCK_COMMENT_END,
    BLOCK_COMMENT_START,
    DEFAULT_INGREDIENT_QUANTITY,
    GROUP_CLOSE,
    GROUP_OPEN,
    LINE_COMMENT,
    LINE_GRAMMAR,
    METADATA_PREFIX,
    RULE_COMMENT,
    RULE_METADATA,
    RULE_MULTIWORD_COOKWARE,
    RULE_MULTIWORD_INGREDIENT,
    RULE_SINGLEWORD_COOKWARE,
    RULE_SINGLEWORD_INGREDIENT,
    RULE_TIMER,
    SHOPPING_LIST_PATTERN,
    SYNONYM_SEPARATOR,
    TRIGGER_PATTERN,
    UNITS_SEPARATOR,
    WORD_PATTERN,
)
from ..models.recipe import (
    CookwareNode,
    IngredientNode,
    Node,
    Recipe,
    ShoppingListItem,
    Step,
    TextNode,
    TimerNode,
)
from .base_parser import BaseRecipeParser
from .quantity import parse_quantity, parse_units

_LOGGER = logging.getLogger(__name__)

# Captured fields of a rule match, by name
Fields = dict[str, Optional[str]]


class _Finder:
    """Finds the next occurrence of a delimiter in a text.

    The last answer for each delimiter is reused while it still lies ahead
    of the requested position, so a left-to-right scan reads the text once
    per delimiter.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._last: dict[str, tuple[int, int]] = {}

    def find(self, needle: str, start: int) -> int:
        """Return the index of needle at or after start, or -1."""
        if needle in self._last:
            searched_from, found = self._last[needle]
            if searched_from <= start and (found == -1 or found >= start):
                return found

        found = self.text.find(needle, start)
        self._last[needle] = (start, found)
        return found


def strip_comments(source: str) -> str:
    """Remove line comments and replace block comments with a space.

    Args:
        source: Raw Cooklang text

    Returns:
        The text without '-- ...' line comments; every '[- ... -]' block
        comment is replaced by a single space
    """
    finder = _Finder(source)
    parts = []
    pos = 0

    while True:
        line_comment = finder.find(LINE_COMMENT, pos)
        block_start = finder.find(BLOCK_COMMENT_START, pos)
        block_end = -1
        if block_start != -1:
            block_end = finder.find(BLOCK_COMMENT_END, block_start + len(BLOCK_COMMENT_START))

        # An unterminated block comment never closes later either
        if block_end != -1 and (line_comment == -1 or block_start < line_comment):
            parts.append(source[pos:block_start])
            parts.append(" ")
            pos = block_end + len(BLOCK_COMMENT_END)
        elif line_comment != -1:
            parts.append(source[pos:line_comment])
            line_end = source.find("\n", line_comment)
            pos = len(source) if line_end == -1 else line_end
        else:
            break

    parts.append(source[pos:])
    return "".join(parts)


def parse_shopping_list_items(items: str) -> list[ShoppingListItem]:
    """Parse the item lines of a shopping-list block.

    Args:
        items: The lines following a '[category]' header

    Returns:
        One item per non-empty line, split on the first '|' into name and
        synonym
    """
    shopping_items = []

    for line in items.split("\n"):
        line = line.strip()
        if not line:
            continue

        name, _, synonym = line.partition(SYNONYM_SEPARATOR)
        shopping_items.append(
            ShoppingListItem(name=name.strip(), synonym=synonym.strip())
        )

    return shopping_items


def extract_shopping_lists(source: str) -> tuple[str, dict[str, list[ShoppingListItem]]]:
    """Find shopping-list blocks and remove them from the text.

    Args:
        source: Comment-free Cooklang text

    Returns:
        Tuple of (remaining text, shopping lists by category)
    """
    shopping_list: dict[str, list[ShoppingListItem]] = {}

    def _collect(match: re.Match[str]) -> str:
        category = match.group("name").strip()
        items = parse_shopping_list_items(match.group("items"))
        _LOGGER.debug(
            "Found shopping list category '%s' with %d items", category, len(items))
        shopping_list[category] = items
        return ""

    remaining = SHOPPING_LIST_PATTERN.sub(_collect, source)
    return remaining, shopping_list


def _split_units(group: str) -> tuple[str, str | None]:
    """Split '{quantity%units}' group content on its first '%'.

    A '%' with nothing after it is part of the quantity.
    """
    quantity, separator, units = group.partition(UNITS_SEPARATOR)
    if not separator or not units:
        return group, None
    return quantity, units


def _match_group(
    line: str,
    start: int,
    finder: _Finder,
    name_required: bool,
) -> tuple[int, str, str] | None:
    """Match 'sigil name{group}' where the name runs to the first '{'.

    Returns:
        Tuple of (end, name, group content), or None without a closed group
    """
    name_start = start + 1
    if name_required and (name_start >= len(line) or line[name_start] == GROUP_OPEN):
        return None

    group_open = finder.find(GROUP_OPEN, name_start)
    if group_open == -1:
        return None

    group_close = finder.find(GROUP_CLOSE, group_open + 1)
    if group_close == -1:
        return None

    return group_close + 1, line[name_start:group_open], line[group_open + 1:group_close]


def _match_metadata(line: str, start: int, finder: _Finder) -> tuple[int, Fields] | None:
    """Match '>> key: value' spanning the whole line."""
    if start != 0 or not line.startswith(METADATA_PREFIX):
        return None

    key_start = len(METADATA_PREFIX)
    while key_start < len(line) and line[key_start].isspace():
        key_start += 1

    colon = line.find(":", key_start + 1)
    if colon != -1 and colon + 1 < len(line):
        key = line[key_start:colon]
    elif len(METADATA_PREFIX) < key_start < len(line) - 1 and line[key_start] == ":":
        # '>> :value' keeps the last blank before the colon as the key
        key, colon = line[key_start - 1], key_start
    else:
        return None

    return len(line), {"key": key, "value": line[colon + 1:]}


def _match_multiword_ingredient(line: str, start: int, finder: _Finder) -> tuple[int, Fields] | None:
    matched = _match_group(line, start, finder, name_required=True)
    if matched is None:
        return None

    end, name, group = matched
    quantity, units = _split_units(group)
    return end, {"name": name, "quantity": quantity, "units": units}


def _match_word(line: str, start: int, finder: _Finder) -> tuple[int, Fields] | None:
    word = WORD_PATTERN.match(line, start + 1)
    if word is None:
        return None
    return word.end(), {"name": word.group(0)}


def _match_multiword_cookware(line: str, start: int, finder: _Finder) -> tuple[int, Fields] | None:
    matched = _match_group(line, start, finder, name_required=True)
    if matched is None:
        return None

    end, name, group = matched
    return end, {"name": name, "quantity": group}


def _match_timer(line: str, start: int, finder: _Finder) -> tuple[int, Fields] | None:
    matched = _match_group(line, start, finder, name_required=False)
    if matched is None:
        return None

    end, name, group = matched
    quantity, units = _split_units(group)
    return end, {"name": name, "quantity": quantity, "units": units}


def _match_comment(line: str, start: int, finder: _Finder) -> tuple[int, Fields] | None:
    if line.startswith(LINE_COMMENT, start):
        return len(line), {}

    if line.startswith(BLOCK_COMMENT_START, start):
        end = finder.find(BLOCK_COMMENT_END, start + len(BLOCK_COMMENT_START))
        if end != -1:
            return end + len(BLOCK_COMMENT_END), {}

    return None


_MATCHERS: dict[str, Callable[[str, int, _Finder], tuple[int, Fields] | None]] = {
    RULE_METADATA: _match_metadata,
    RULE_MULTIWORD_INGREDIENT: _match_multiword_ingredient,
    RULE_SINGLEWORD_INGREDIENT: _match_word,
    RULE_MULTIWORD_COOKWARE: _match_multiword_cookware,
    RULE_SINGLEWORD_COOKWARE: _match_word,
    RULE_TIMER: _match_timer,
    RULE_COMMENT: _match_comment,
}


def _rules_by_trigger() -> dict[str, tuple[str, ...]]:
    """Group grammar rules by trigger character, keeping precedence order."""
    rules: dict[str, tuple[str, ...]] = {}
    for rule, trigger in LINE_GRAMMAR:
        rules[trigger] = rules.get(trigger, ()) + (rule,)
    return rules


_RULES_BY_TRIGGER = _rules_by_trigger()


def _match_at(line: str, start: int, finder: _Finder) -> tuple[str, int, Fields] | None:
    """Try the grammar rules for the character at start, in precedence order."""
    for rule in _RULES_BY_TRIGGER[line[start]]:
        matched = _MATCHERS[rule](line, start, finder)
        if matched is not None:
            end, fields = matched
            return rule, end, fields
    return None


def _build_node(rule: str, fields: Fields, metadata: dict[str, str]) -> Node | None:
    """Turn a grammar match into a step node.

    Metadata matches are recorded into metadata and produce no node, as do
    comment remnants.
    """
    if rule == RULE_METADATA:
        metadata[fields["key"].strip()] = fields["value"].strip()
        return None

    if rule == RULE_MULTIWORD_INGREDIENT:
        return IngredientNode(
            name=fields["name"],
            quantity=parse_quantity(
                fields["quantity"], DEFAULT_INGREDIENT_QUANTITY),
            units=parse_units(fields["units"]),
        )

    if rule == RULE_SINGLEWORD_INGREDIENT:
        return IngredientNode(
            name=fields["name"],
            quantity=DEFAULT_INGREDIENT_QUANTITY,
        )

    if rule == RULE_MULTIWORD_COOKWARE:
        return CookwareNode(
            name=fields["name"],
            quantity=parse_quantity(fields["quantity"]),
        )

    if rule == RULE_SINGLEWORD_COOKWARE:
        return CookwareNode(name=fields["name"])

    if rule == RULE_TIMER:
        return TimerNode(
            name=fields["name"] or None,
            quantity=parse_quantity(fields["quantity"]),
            units=parse_units(fields["units"]),
        )

    if rule == RULE_COMMENT:
        return None

    raise AssertionError(f"Unhandled grammar rule: {rule}")


def tokenize_line(line: str, metadata: dict[str, str]) -> Step:
    """Tokenize one line into an ordered list of nodes.

    Args:
        line: A single non-blank line
        metadata: Recipe metadata, updated in place by metadata lines

    Returns:
        The step nodes in reading order; text between entities is kept
        exactly as written
    """
    step: Step = []
    finder = _Finder(line)
    pos = 0

    for trigger in TRIGGER_PATTERN.finditer(line):
        start = trigger.start()
        if start < pos:
            continue

        found = _match_at(line, start, finder)
        if found is None:
            continue

        rule, end, fields = found
        if pos < start:
            step.append(TextNode(value=line[pos:start]))

        _LOGGER.debug("Matched %s at %d: '%s'", rule, start, line[start:end])
        node = _build_node(rule, fields, metadata)
        if node is not None:
            step.append(node)

        pos = end

    if pos < len(line):
        step.append(TextNode(value=line[pos:]))

    return step


def parse(source: str) -> Recipe:
    """Parse a Cooklang string into a Recipe.

    Args:
        source: A Cooklang string

    Returns:
        The extracted metadata, steps, and shopping lists
    """
    metadata: dict[str, str] = {}
    steps: list[Step] = []

    source = source.replace("\r\n", "\n").replace("\r", "\n")
    source = strip_comments(source)
    source, shopping_list = extract_shopping_lists(source)

    for line in source.split("\n"):
        if not line.strip():
            continue

        step = tokenize_line(line, metadata)
        if step:
            steps.append(step)

    _LOGGER.debug(
        "Parsed recipe with %d metadata entries, %d steps and %d shopping list categories",
        len(metadata), len(steps), len(shopping_list))

    return Recipe(
        metadata=metadata,
        steps=steps,
        shopping_list=shopping_list,
    )


class CooklangParser(BaseRecipeParser):
    """Parses recipe data from Cooklang markup."""

    def parse_recipe(self, text: str) -> Recipe:
        """Parse a Cooklang string into a Recipe.

        Args:
            text: A Cooklang string

        Returns:
            The parsed Recipe; never None
        """
        return parse(text)
