"""
Cart related data models
"""
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Tuple, Dict, Any


def round_amount(value: Decimal) -> int:
    """Round a money amount to the nearest whole currency unit (half up)"""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class ParsedQuantity:
    """Result of parsing a quantity token against an item"""
    multiplier: Decimal
    display: str


@dataclass
class CartLine:
    """Cart line data model"""
    item_id: str
    name: str
    unit_price: Decimal
    multiplier: Decimal
    line_total: int
    display: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "item_id": self.item_id,
            "name": self.name,
            "unit_price": str(self.unit_price),
            "multiplier": str(self.multiplier),
            "line_total": self.line_total,
            "display": self.display
        }


@dataclass
class Cart:
    """Per-user cart, lines kept in insertion order"""
    lines: List[CartLine] = field(default_factory=list)
    total: int = 0

    def find_line(self, item_id: str) -> Optional[CartLine]:
        for line in self.lines:
            if line.item_id == item_id:
                return line
        return None

    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class CartSnapshot:
    """Immutable view of a cart used to build an order"""
    lines: Tuple[CartLine, ...]
    total: int

    def items_summary(self) -> str:
        return ", ".join(f"{line.name} x{line.display}" for line in self.lines)
