"""
Error taxonomy for the grocery order bot
"""
from enum import Enum


class GroceryBotError(Exception):
    """Base class for all bot errors"""


class CatalogUnavailable(GroceryBotError):
    """The catalog could not be loaded"""


class QuantityErrorKind(Enum):
    INVALID_FORMAT = "invalid_format"
    NOT_POSITIVE = "not_positive"
    UNKNOWN_UNIT = "unknown_unit"


class QuantityError(GroceryBotError):
    """A quantity token could not be turned into a multiplier"""

    def __init__(self, kind: QuantityErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class SegmentFormatError(GroceryBotError):
    """An item-entry segment is not '<item_number> <quantity>'"""


class PersistenceError(GroceryBotError):
    """An order sink failed to store an order"""


class NotificationError(GroceryBotError):
    """The secondary recipient could not be notified"""
