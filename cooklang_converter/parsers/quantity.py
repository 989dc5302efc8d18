"""
Quantity and Units Resolution.

Turns the raw quantity and units captured from an ingredient, cookware or
timer group into model values. A quantity becomes a number when it is a
plain decimal numeral or a simple fraction, and stays literal text
otherwise.
"""
from __future__ import annotations

import logging
import math

from ..const import NUMBER_PATTERN
from ..models.recipe import Quantity

_LOGGER = logging.getLogger(__name__)


def _parse_number(text: str) -> float | None:
    """Parse a plain decimal numeral like '3', '1.5' or '.25'.

    Args:
        text: The (already trimmed) numeral

    Returns:
        The float value, or None if the text is not a finite numeral
    """
    if not NUMBER_PATTERN.fullmatch(text):
        return None

    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def _parse_fraction(quantity: str) -> float | None:
    """Parse a fraction string like '1/2' or '3 / 4'.

    Both sides must be numerals and neither may start with a zero (a sign
    does not count), so '01/2', '+01/2' or '0.5/2' are not fractions.

    Args:
        quantity: A string containing exactly one '/'

    Returns:
        The quotient, or None if the string is not a usable fraction
    """
    numerator_text, denominator_text = (
        part.strip() for part in quantity.split("/"))

    if numerator_text.lstrip("+-").startswith("0") or denominator_text.lstrip("+-").startswith("0"):
        return None

    numerator = _parse_number(numerator_text)
    denominator = _parse_number(denominator_text)
    if numerator is None or denominator is None or denominator == 0:
        return None

    value = numerator / denominator
    if not math.isfinite(value):
        return None
    return value


def parse_quantity(quantity: str | None, default: str | None = None) -> Quantity | None:
    """Resolve a raw quantity string.

    Args:
        quantity: The raw quantity text, possibly empty or None
        default: Literal text used when the quantity is empty

    Returns:
        A float for numerals and simple fractions, the trimmed text
        otherwise, the default for an empty quantity, or None

    Examples:
        >>> parse_quantity('1/2')
        0.5
        >>> parse_quantity('01/2')
        '01/2'
        >>> parse_quantity('', 'some')
        'some'
        >>> parse_quantity('1,5')
        '1,5'
    """
    if quantity is None or not quantity.strip():
        return default or None

    quantity = quantity.strip()
    slashes = quantity.count("/")

    if slashes == 0:
        value = _parse_number(quantity)
    elif slashes == 1:
        value = _parse_fraction(quantity)
    else:
        value = None

    if value is None:
        _LOGGER.debug("Keeping quantity '%s' as literal text", quantity)
        return quantity
    return value


def parse_units(units: str | None) -> str | None:
    """Trim a raw units string, returning None when nothing is left."""
    if units is None:
        return None
    return units.strip() or None
