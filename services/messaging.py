"""
Outbound reply transports
"""
import logging
import threading
from collections import deque
from typing import Deque, Dict, List

logger = logging.getLogger(__name__)


class ReplySender:
    """Delivers text to a user on the messaging channel"""

    def send_reply(self, recipient_id: str, text: str):
        raise NotImplementedError


class ConsoleReplySender(ReplySender):
    # Prints replies, used by the terminal UI

    def send_reply(self, recipient_id: str, text: str):
        print(f"\n{text}")


class CollectingReplySender(ReplySender):
    # Buffers replies per recipient until the channel picks them up;
    # an unread queue keeps only the newest max_pending messages

    def __init__(self, max_pending: int = 100):
        self.max_pending = max_pending
        self._outbox: Dict[str, Deque[str]] = {}
        self._lock = threading.Lock()

    def send_reply(self, recipient_id: str, text: str):
        with self._lock:
            queue = self._outbox.get(recipient_id)
            if queue is None:
                queue = self._outbox[recipient_id] = deque(maxlen=self.max_pending)
            if len(queue) == self.max_pending:
                logger.warning("Outbox for %s is full, dropping oldest message", recipient_id)
            queue.append(text)

    def drain(self, recipient_id: str) -> List[str]:
        with self._lock:
            return list(self._outbox.pop(recipient_id, ()))


def safe_send(sender: ReplySender, recipient_id: str, text: str) -> bool:
    # Transport failures are logged, never raised into the handler
    try:
        sender.send_reply(recipient_id, text)
        return True
    except Exception as e:
        logger.error("Could not send reply to %s: %s", recipient_id, e)
        return False
