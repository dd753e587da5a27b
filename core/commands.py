"""
Command parsing - maps raw utterances onto a closed set of command types
"""
from typing import Iterable

from models.command import Command, CommandType

KEYWORDS = {
    "start": CommandType.MENU,
    "menu": CommandType.MENU,
    "categories": CommandType.MENU,
    "shop": CommandType.MENU,
    "help": CommandType.HELP,
    "contact": CommandType.CONTACT,
    "cart": CommandType.CART,
    "clear": CommandType.CLEAR,
    "back": CommandType.BACK,
    "confirm": CommandType.CONFIRM,
}


def normalize(text: str) -> str:
    return (text or "").strip().lower()


def parse_command(text: str, category_keys: Iterable[str] = ()) -> Command:
    # Keywords first, then bare category keys, everything else is free text
    normalized = normalize(text)

    command_type = KEYWORDS.get(normalized)
    if command_type is not None:
        return Command(command_type, normalized)

    if normalized in set(category_keys):
        return Command(CommandType.SELECT_CATEGORY, normalized)

    return Command(CommandType.FREE_TEXT, normalized)
