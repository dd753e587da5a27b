"""
Line-item parsing - handles utterances like "1 2, 3 500g" inside a category
"""
from typing import Dict, List, Any

from models.catalog import Category
from models.cart import Cart, CartLine
from core.exceptions import QuantityError, SegmentFormatError
from .cart_service import CartService
from .quantity_parser import parse_quantity


class LineItemParser:
    # Resolves "<item_number> <quantity>" segments and applies them to a cart

    def __init__(self, cart_service: CartService):
        self.cart_service = cart_service

    def parse_line(self, utterance: str, category: Category, cart: Cart) -> Dict[str, Any]:
        """Apply every comma-separated segment of the utterance to the cart.

        Bad segments never abort the line: each one adds a message to
        "errors" and parsing continues with the next segment. "added" holds
        a copy of the cart line as it stood right after each successful add.
        """
        added: List[CartLine] = []
        errors: List[str] = []

        for segment in (part.strip() for part in utterance.split(",")):
            try:
                line = self._apply_segment(segment, category, cart)
            except SegmentFormatError as e:
                errors.append(f'"{segment}" - {e}')
                continue
            except QuantityError as e:
                errors.append(f'"{segment}" - {e.message}')
                continue
            added.append(CartLine(**vars(line)))

        return {
            "added": added,
            "errors": errors
        }

    def _apply_segment(self, segment: str, category: Category, cart: Cart) -> CartLine:
        parts = segment.split()
        if len(parts) != 2:
            raise SegmentFormatError("Use format: item_number quantity")

        ordinal_token, quantity_token = parts
        item = category.item_at(int(ordinal_token)) if ordinal_token.isdecimal() else None
        if item is None:
            raise SegmentFormatError(
                f"Item {ordinal_token} not found (use 1-{len(category.items)})"
            )

        quantity = parse_quantity(quantity_token, item)
        return self.cart_service.add_or_replace(cart, item, quantity)
