"""
Secondary notification of new orders (e.g. the shopkeeper)
"""
import logging

from core.exceptions import NotificationError
from .messaging import ReplySender

logger = logging.getLogger(__name__)


class OrderNotifier:
    # Best effort: failures are logged and reported as False, never raised

    def __init__(self, sender: ReplySender, recipient_id: str = ""):
        self.sender = sender
        self.recipient_id = recipient_id

    @property
    def enabled(self) -> bool:
        return bool(self.recipient_id)

    def notify(self, text: str) -> bool:
        if not self.enabled:
            return False
        try:
            self._deliver(text)
        except NotificationError as e:
            logger.warning("Failed to notify %s: %s", self.recipient_id, e)
            return False
        logger.info("Order notification sent to %s", self.recipient_id)
        return True

    def _deliver(self, text: str):
        try:
            self.sender.send_reply(self.recipient_id, text)
        except Exception as e:
            raise NotificationError(str(e)) from e
