"""
Catalog related data models
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Tuple, Any


@dataclass(frozen=True)
class Item:
    """Catalog item data model"""
    item_id: str
    name: str
    price: Decimal
    unit: str  # base unit the price is quoted in: 1kg, 250g, 100ml, piece

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "item_id": self.item_id,
            "name": self.name,
            "price": str(self.price),
            "unit": self.unit
        }


@dataclass(frozen=True)
class Category:
    """Category data model"""
    key: str
    name: str
    emoji: str
    items: Tuple[Item, ...] = ()

    def item_at(self, ordinal: int) -> Optional[Item]:
        # 1-based lookup, None when out of range
        if 1 <= ordinal <= len(self.items):
            return self.items[ordinal - 1]
        return None


@dataclass
class Catalog:
    """Read-only category -> items structure"""
    categories: Dict[str, Category] = field(default_factory=dict)

    def keys(self) -> List[str]:
        return list(self.categories.keys())

    def get(self, key: str) -> Optional[Category]:
        return self.categories.get(key)

    def total_item_count(self) -> int:
        return sum(len(category.items) for category in self.categories.values())
