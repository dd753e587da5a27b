"""
Order persistence - primary sink with a durable local fallback
"""
import json
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Dict, Any

from models.order import Order
from database.repository import OrderRepository
from core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class OrderSink:
    """Somewhere a confirmed order can be stored"""

    name = "sink"

    def persist_order(self, order: Order):
        raise NotImplementedError


class DatabaseOrderSink(OrderSink):
    # Primary sink: the Orders table

    name = "database"

    def __init__(self, order_repository: OrderRepository):
        self.order_repo = order_repository

    def persist_order(self, order: Order):
        try:
            self.order_repo.create_order(order)
        except Exception as e:
            raise PersistenceError(f"could not store order {order.order_id}: {e}") from e


class BackupFileSink(OrderSink):
    # Fallback sink: one JSON object per line, append only

    name = "backup_file"

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def persist_order(self, order: Order, error: str = ""):
        record = {
            "timestamp": datetime.now().isoformat(),
            "orderId": order.order_id,
            "customerName": order.customer_name,
            "phone": order.customer_phone,
            "items": order.items_summary,
            "totalAmount": order.total_amount,
            "status": order.status.value,
            "createdAt": order.created_at
        }
        if error:
            record["error"] = error

        try:
            with self._lock:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, "a", encoding="utf-8") as f:
                    f.write(json.dumps(record, ensure_ascii=False) + "\n")
        except OSError as e:
            raise PersistenceError(f"could not append order {order.order_id} to {self.path}: {e}") from e


class OrderPersistence:
    # Two tiers: primary is retried, fallback is used only after primary gives up

    def __init__(self, primary: OrderSink, fallback: BackupFileSink, attempts: int = 2):
        self.primary = primary
        self.fallback = fallback
        self.attempts = max(1, attempts)

    def save(self, order: Order) -> Dict[str, Any]:
        last_error = None
        for attempt in range(1, self.attempts + 1):
            try:
                self.primary.persist_order(order)
                logger.info("Order %s saved to %s", order.order_id, self.primary.name)
                return {"success": True, "sink": self.primary.name}
            except PersistenceError as e:
                last_error = e
                logger.warning("Order %s: %s failed (attempt %d/%d): %s",
                               order.order_id, self.primary.name, attempt, self.attempts, e)

        try:
            self.fallback.persist_order(order, error=str(last_error))
            logger.warning("Order %s saved to %s", order.order_id, self.fallback.name)
            return {"success": True, "sink": self.fallback.name, "error": str(last_error)}
        except PersistenceError as e:
            # Both tiers failed; the log line is the last record of the order
            logger.error("Order %s could not be persisted anywhere: %s | order=%s",
                         order.order_id, e, json.dumps(order.to_dict(), ensure_ascii=False))
            return {"success": False, "sink": None, "error": str(e)}
