"""
Shared helpers for the test suite
"""
from decimal import Decimal
from pathlib import Path

from core.config import Settings
from models.catalog import Item, Category
from models.message import InboundMessage
from init_db import init_database


def make_settings(workdir: str, **overrides) -> Settings:
    """Settings pointing every file into a temporary directory"""
    values = dict(
        db_path=Path(workdir) / "grocery.db",
        orders_backup_path=Path(workdir) / "orders-backup.jsonl",
        shopkeeper_id="",
        store_name="Fresh Mart",
        store_phone="+91 99822 30201",
        store_address="123 Market Street",
        store_hours="8 AM - 10 PM",
        currency_symbol="₹",
        free_delivery_above=500,
        order_persist_attempts=2,
        log_level="INFO"
    )
    values.update(overrides)
    return Settings(**values)


def seeded_settings(workdir: str, **overrides) -> Settings:
    """Settings whose database holds the sample catalog"""
    settings = make_settings(workdir, **overrides)
    init_database(str(settings.db_path))
    return settings


def dairy_category() -> Category:
    return Category(
        key="2",
        name="Dairy Products",
        emoji="🥛",
        items=(
            Item("d1", "Fresh Milk", Decimal("55"), "1L"),
            Item("d2", "Amul Butter", Decimal("52"), "100g"),
            Item("d3", "Paneer", Decimal("80"), "250g"),
            Item("d4", "Curd", Decimal("40"), "500g"),
            Item("d5", "Cheese Slices", Decimal("120"), "200g"),
        )
    )


def text_message(text: str, sender_id: str = "919876543210@c.us",
                 sender_name: str = "Asha") -> InboundMessage:
    return InboundMessage(sender_id=sender_id, text=text, sender_name=sender_name)
