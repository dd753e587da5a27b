"""
Models package for the grocery order bot
Contains data models and type definitions
"""

from .catalog import Item, Category, Catalog
from .cart import ParsedQuantity, CartLine, Cart, CartSnapshot, round_amount
from .order import Order, OrderStatus
from .session import Session, SessionState
from .command import Command, CommandType
from .message import InboundMessage

__all__ = [
    'Item', 'Category', 'Catalog',
    'ParsedQuantity', 'CartLine', 'Cart', 'CartSnapshot', 'round_amount',
    'Order', 'OrderStatus',
    'Session', 'SessionState',
    'Command', 'CommandType',
    'InboundMessage'
]
