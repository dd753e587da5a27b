"""
Services package for the grocery order bot
Contains business logic services
"""

from .catalog_service import CatalogService
from .cart_service import CartService
from .quantity_parser import parse_quantity
from .line_item_parser import LineItemParser
from .order_service import OrderService, OrderIdGenerator
from .persistence import OrderPersistence, DatabaseOrderSink, BackupFileSink
from .notification import OrderNotifier
from .formatter import MessageFormatter

__all__ = [
    'CatalogService', 'CartService', 'parse_quantity', 'LineItemParser',
    'OrderService', 'OrderIdGenerator',
    'OrderPersistence', 'DatabaseOrderSink', 'BackupFileSink',
    'OrderNotifier', 'MessageFormatter'
]
