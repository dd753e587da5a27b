"""
Database package for the grocery order bot
Contains database connection and repository classes
"""

from .connection import DatabaseConnection
from .repository import CatalogRepository, OrderRepository

__all__ = [
    'DatabaseConnection',
    'CatalogRepository', 'OrderRepository'
]
