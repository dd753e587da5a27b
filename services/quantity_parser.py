"""
Quantity parsing - turns tokens like "2", "500g" or "1.5l" into a price multiplier
"""
import re
from decimal import Decimal
from typing import Optional

from models.catalog import Item
from models.cart import ParsedQuantity
from core.exceptions import QuantityError, QuantityErrorKind

QUANTITY_PATTERN = re.compile(r"^([0-9]+\.?[0-9]*)([a-z]*)$")
BASE_QUANTITY_PATTERN = re.compile(r"(\d+)")

KILOGRAM_UNITS = ("kg", "kgs")
GRAM_UNITS = ("g", "gm", "gms")
LITER_UNITS = ("l", "lt", "ltr", "litre", "liter")
MILLILITER_UNITS = ("ml", "mls")

THOUSAND = Decimal(1000)
# Whole-number part of a quantity, keeps line totals within decimal precision
MAX_INTEGER_DIGITS = 9


def format_number(value: Decimal) -> str:
    # 500 -> "500", 2.50 -> "2.5", no exponent notation
    return format(value.normalize(), "f")


def base_quantity(unit: str) -> Optional[Decimal]:
    # First integer embedded in a base unit label: "250g" -> 250
    match = BASE_QUANTITY_PATTERN.search(unit)
    if not match or int(match.group(1)) == 0:
        return None
    return Decimal(int(match.group(1)))


def parse_quantity(token: str, item: Item) -> ParsedQuantity:
    """Parse a quantity token relative to the item's base unit.

    A bare number counts units of the item itself. Unit suffixes are
    converted against item.unit. Kilogram input is always used directly as
    the multiplier, while gram, liter and milliliter input divide by the
    base quantity embedded in item.unit when the families match.

    Raises QuantityError for malformed or oversized tokens, non-positive
    numbers and unrecognized unit suffixes.
    """
    match = QUANTITY_PATTERN.match(token.strip().lower())
    if not match:
        raise QuantityError(QuantityErrorKind.INVALID_FORMAT, "Invalid quantity format")

    if len(match.group(1).split(".")[0].lstrip("0")) > MAX_INTEGER_DIGITS:
        raise QuantityError(QuantityErrorKind.INVALID_FORMAT, "Invalid quantity format")

    number = Decimal(match.group(1))
    unit = match.group(2)

    if number <= 0:
        raise QuantityError(QuantityErrorKind.NOT_POSITIVE, "Quantity must be greater than 0")

    shown = format_number(number)

    if not unit:
        return ParsedQuantity(multiplier=number, display=f"{shown} {item.unit}")

    base_unit = item.unit.lower()

    if unit in KILOGRAM_UNITS:
        return ParsedQuantity(multiplier=number, display=f"{shown}kg")

    if unit in GRAM_UNITS:
        if "kg" in base_unit:
            multiplier = number / THOUSAND
        elif "g" in base_unit:
            base = base_quantity(base_unit)
            multiplier = number / base if base else number / THOUSAND
        else:
            multiplier = number / THOUSAND
        return ParsedQuantity(multiplier=multiplier, display=f"{shown}g")

    if unit in LITER_UNITS:
        if "l" in base_unit:
            base = base_quantity(base_unit)
            multiplier = number / base if base else number
        else:
            multiplier = number
        return ParsedQuantity(multiplier=multiplier, display=f"{shown}L")

    if unit in MILLILITER_UNITS:
        if "ml" in base_unit:
            base = base_quantity(base_unit)
            multiplier = number / base if base else number / THOUSAND
        else:
            multiplier = number / THOUSAND
        return ParsedQuantity(multiplier=multiplier, display=f"{shown}ml")

    raise QuantityError(
        QuantityErrorKind.UNKNOWN_UNIT,
        f'Unknown unit "{unit}" - use kg, g, l, ml or just numbers'
    )
