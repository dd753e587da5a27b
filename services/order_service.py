"""
Order service - handles order confirmation
"""
import logging
import threading
import time
from datetime import datetime
from typing import Dict, Optional, Any

from models.cart import Cart
from models.order import Order, OrderStatus
from .cart_service import CartService
from .persistence import OrderPersistence
from .notification import OrderNotifier
from .formatter import MessageFormatter

logger = logging.getLogger(__name__)

CHANNEL_SUFFIXES = ("@c.us", "@s.whatsapp.net")


class OrderIdGenerator:
    # ORD + millisecond token, strictly increasing within the process

    def __init__(self, clock=time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            token = max(int(self._clock() * 1000), self._last + 1)
            self._last = token
        return f"ORD{token}"


def phone_from_sender(sender_id: str) -> str:
    for suffix in CHANNEL_SUFFIXES:
        if sender_id.endswith(suffix):
            return sender_id[:-len(suffix)]
    return sender_id


class OrderService:
    # Turns a cart into an order, stores it and tells the shopkeeper

    def __init__(self, cart_service: CartService, persistence: OrderPersistence,
                 notifier: OrderNotifier, formatter: MessageFormatter,
                 id_generator: Optional[OrderIdGenerator] = None):
        self.cart_service = cart_service
        self.persistence = persistence
        self.notifier = notifier
        self.formatter = formatter
        self.id_generator = id_generator or OrderIdGenerator()

    def create_order(self, cart: Cart, sender_id: str, customer_name: Optional[str] = None) -> Order:
        snapshot = self.cart_service.snapshot(cart)
        return Order(
            order_id=self.id_generator.next_id(),
            customer_name=customer_name or "Unknown",
            customer_phone=phone_from_sender(sender_id),
            items_summary=snapshot.items_summary(),
            total_amount=snapshot.total,
            status=OrderStatus.PENDING,
            created_at=datetime.now().isoformat(timespec="seconds"),
            snapshot=snapshot
        )

    def process_order(self, cart: Optional[Cart], sender_id: str,
                      customer_name: Optional[str] = None) -> Dict[str, Any]:
        """Confirm the cart as an order.

        The caller owns the cart and session and resets both when this
        returns success. Persistence falls back to the backup file and
        notification is best effort, so neither can fail a confirmation.
        """
        if cart is None or cart.is_empty():
            return {
                "success": False,
                "error": "empty_cart"
            }

        order = self.create_order(cart, sender_id, customer_name)
        stored = self.persistence.save(order)

        notified = False
        if self.notifier.enabled:
            notified = self.notifier.notify(self.formatter.new_order_notification(order))

        logger.info("Order %s confirmed for %s: %s", order.order_id, order.customer_phone,
                    self.formatter.money(order.total_amount))

        return {
            "success": True,
            "order": order,
            "order_id": order.order_id,
            "total_amount": order.total_amount,
            "stored_in": stored["sink"],
            "notified": notified
        }
