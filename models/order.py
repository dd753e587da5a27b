"""
Order related data models
"""
from dataclasses import dataclass
from typing import Dict, Any
from enum import Enum

from .cart import CartSnapshot


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Order:
    """Order data model"""
    order_id: str
    customer_name: str
    customer_phone: str
    items_summary: str
    total_amount: int
    status: OrderStatus
    created_at: str
    snapshot: CartSnapshot

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "order_id": self.order_id,
            "customer_name": self.customer_name,
            "customer_phone": self.customer_phone,
            "items_summary": self.items_summary,
            "total_amount": self.total_amount,
            "status": self.status.value,
            "created_at": self.created_at
        }
