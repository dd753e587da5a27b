"""
Conversation session data models
"""
from dataclasses import dataclass
from typing import Optional
from enum import Enum


class SessionState(Enum):
    MAIN = "main"
    CATEGORY = "category"


@dataclass
class Session:
    """Per-user conversation state"""
    state: SessionState = SessionState.MAIN
    active_category_key: Optional[str] = None

    def enter_category(self, key: str):
        self.state = SessionState.CATEGORY
        self.active_category_key = key

    def reset(self):
        self.state = SessionState.MAIN
        self.active_category_key = None
