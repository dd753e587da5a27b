"""
Command data models
"""
from dataclasses import dataclass
from enum import Enum


class CommandType(Enum):
    MENU = "menu"
    HELP = "help"
    CONTACT = "contact"
    CART = "cart"
    CLEAR = "clear"
    BACK = "back"
    CONFIRM = "confirm"
    SELECT_CATEGORY = "select_category"
    FREE_TEXT = "free_text"


@dataclass(frozen=True)
class Command:
    """A parsed utterance; text is the normalized input"""
    type: CommandType
    text: str
