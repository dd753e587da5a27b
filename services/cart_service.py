"""
Cart service - handles cart operations
"""
from typing import Dict, Any, Optional

from models.catalog import Item
from models.cart import Cart, CartLine, CartSnapshot, ParsedQuantity, round_amount


class CartService:
    # Cart business logic; carts themselves are owned by the user state store

    def new_cart(self) -> Cart:
        return Cart()

    def add_or_replace(self, cart: Cart, item: Item, quantity: ParsedQuantity) -> CartLine:
        # Last specified quantity wins: an existing line is overwritten, not topped up
        line_total = round_amount(item.price * quantity.multiplier)

        existing = cart.find_line(item.item_id)
        if existing:
            cart.total += line_total - existing.line_total
            existing.multiplier = quantity.multiplier
            existing.line_total = line_total
            existing.display = quantity.display
            return existing

        line = CartLine(
            item_id=item.item_id,
            name=item.name,
            unit_price=item.price,
            multiplier=quantity.multiplier,
            line_total=line_total,
            display=quantity.display
        )
        cart.lines.append(line)
        cart.total += line_total
        return line

    def remove(self, cart: Cart, item_id: str) -> Optional[CartLine]:
        # Drop one line and take its amount off the total
        line = cart.find_line(item_id)
        if line is None:
            return None
        cart.lines.remove(line)
        cart.total -= line.line_total
        return line

    def clear(self, cart: Cart) -> int:
        removed = len(cart.lines)
        cart.lines.clear()
        cart.total = 0
        return removed

    def snapshot(self, cart: Cart) -> CartSnapshot:
        # Copies the lines so later cart mutation cannot reach the order
        lines = tuple(CartLine(**vars(line)) for line in cart.lines)
        return CartSnapshot(lines=lines, total=cart.total)

    def get_cart_details(self, cart: Optional[Cart]) -> Dict[str, Any]:
        # Current cart content with an explicit empty flag for rendering
        if cart is None or cart.is_empty():
            return {
                "empty": True,
                "cart_items": [],
                "summary": {"total_items": 0, "total_amount": 0}
            }

        return {
            "empty": False,
            "cart_items": [line.to_dict() for line in cart.lines],
            "summary": {
                "total_items": len(cart.lines),
                "total_amount": cart.total
            }
        }
