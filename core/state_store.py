"""
Per-user conversation state with per-user serialization
"""
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator, Optional

from models.cart import Cart
from models.session import Session


@dataclass
class UserState:
    """Session and cart owned by one user identity"""
    session: Session = field(default_factory=Session)
    cart: Optional[Cart] = None

    def discard_cart(self):
        self.cart = None


class UserStateStore:
    # Maps user id -> UserState; every access for a user holds that user's lock

    def __init__(self):
        self._states: Dict[str, UserState] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, user_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = self._locks[user_id] = threading.Lock()
            return lock

    @contextmanager
    def locked(self, user_id: str) -> Generator[UserState, None, None]:
        # Users proceed independently; the same user is handled one message at a time
        with self._lock_for(user_id):
            with self._guard:
                state = self._states.get(user_id)
                if state is None:
                    state = self._states[user_id] = UserState()
            yield state

    def peek(self, user_id: str) -> Optional[UserState]:
        with self._guard:
            return self._states.get(user_id)

    def user_count(self) -> int:
        with self._guard:
            return len(self._states)
