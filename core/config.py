"""
Runtime configuration loaded from the environment
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class Settings:
    """Configuration container for storage, store details and limits"""
    db_path: Path
    orders_backup_path: Path
    shopkeeper_id: str
    store_name: str
    store_phone: str
    store_address: str
    store_hours: str
    currency_symbol: str
    free_delivery_above: int
    order_persist_attempts: int
    log_level: str


def load_settings(env_file: Optional[str] = None) -> Settings:
    # .env values never override variables already set in the process
    load_dotenv(env_file)

    db_path = os.getenv("GROCERY_DB_PATH") or str(BASE_DIR / "data" / "grocery.db")
    backup_path = os.getenv("ORDERS_BACKUP_PATH") or str(BASE_DIR / "data" / "orders-backup.jsonl")

    return Settings(
        db_path=Path(db_path),
        orders_backup_path=Path(backup_path),
        shopkeeper_id=os.getenv("SHOPKEEPER_ID", ""),
        store_name=os.getenv("STORE_NAME", "Fresh Mart"),
        store_phone=os.getenv("STORE_PHONE", "+91 99822 30201"),
        store_address=os.getenv("STORE_ADDRESS", "123 Market Street"),
        store_hours=os.getenv("STORE_HOURS", "8 AM - 10 PM"),
        currency_symbol=os.getenv("CURRENCY_SYMBOL", "₹"),
        free_delivery_above=int(os.getenv("FREE_DELIVERY_ABOVE", "500")),
        order_persist_attempts=int(os.getenv("ORDER_PERSIST_ATTEMPTS", "2")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
