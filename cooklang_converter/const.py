"""Constants for the Cooklang converter."""
from __future__ import annotations

import re

# Node types
NODE_TEXT = "text"
NODE_INGREDIENT = "ingredient"
NODE_COOKWARE = "cookware"
NODE_TIMER = "timer"

# Sigils
SIGIL_INGREDIENT = "@"
SIGIL_COOKWARE = "#"
SIGIL_TIMER = "~"
METADATA_PREFIX = ">>"
UNITS_SEPARATOR = "%"
SYNONYM_SEPARATOR = "|"

SIGILS = {
    NODE_INGREDIENT: SIGIL_INGREDIENT,
    NODE_COOKWARE: SIGIL_COOKWARE,
    NODE_TIMER: SIGIL_TIMER,
}

# Default values
DEFAULT_INGREDIENT_QUANTITY = "some"
DEFAULT_IMAGE_EXTENSION = "png"

# Available image extensions
IMAGE_EXTENSIONS = (
    "png",
    "jpg",
)

# Output formats for the command line converter
FORMAT_JSON = "json"
FORMAT_COOK = "cook"
OUTPUT_FORMATS = (FORMAT_JSON, FORMAT_COOK)

# Environment variables read by the command line converter
ENV_LOG_LEVEL = "COOKLANG_LOG_LEVEL"
ENV_OUTPUT_DIR = "COOKLANG_OUTPUT_DIR"
DEFAULT_LOG_LEVEL = "WARNING"

# Grammar rule names, in precedence order
RULE_METADATA = "metadata"
RULE_MULTIWORD_INGREDIENT = "multiword_ingredient"
RULE_SINGLEWORD_INGREDIENT = "singleword_ingredient"
RULE_MULTIWORD_COOKWARE = "multiword_cookware"
RULE_SINGLEWORD_COOKWARE = "singleword_cookware"
RULE_TIMER = "timer"
RULE_COMMENT = "comment"

# Comment delimiters
LINE_COMMENT = "--"
BLOCK_COMMENT_START = "[-"
BLOCK_COMMENT_END = "-]"

# Entity groups
GROUP_OPEN = "{"
GROUP_CLOSE = "}"

# Line grammar: (rule, trigger character), in precedence order. At every
# scan position the leftmost match wins; ties go to the earlier entry.
LINE_GRAMMAR: tuple[tuple[str, str], ...] = (
    (RULE_METADATA, METADATA_PREFIX[0]),
    (RULE_MULTIWORD_INGREDIENT, SIGIL_INGREDIENT),
    (RULE_SINGLEWORD_INGREDIENT, SIGIL_INGREDIENT),
    (RULE_MULTIWORD_COOKWARE, SIGIL_COOKWARE),
    (RULE_SINGLEWORD_COOKWARE, SIGIL_COOKWARE),
    (RULE_TIMER, SIGIL_TIMER),
    (RULE_COMMENT, LINE_COMMENT[0]),
    (RULE_COMMENT, BLOCK_COMMENT_START[0]),
)

# Positions where a grammar rule may start
TRIGGER_PATTERN = re.compile(
    "[" + re.escape("".join(dict.fromkeys(trigger for _, trigger in LINE_GRAMMAR))) + "]")

# Name of a single-word ingredient or cookware
WORD_PATTERN = re.compile(r"\S+")

# Shopping lists: a "[category]" header line followed by non-blank item lines
SHOPPING_LIST_PATTERN = re.compile(
    r"^[ \t]*\[(?P<name>[^\n]+)\][ \t]*(?P<items>(?:\n[^\n]*\S[^\n]*)*)$",
    re.MULTILINE,
)

# Plain decimal numerals accepted as numeric quantities
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
