#!/usr/bin/env python3
"""
Catalog initialization script
Reads data/catalog.sql and loads the sample catalog into the bot database.
"""
import logging
import sys
from pathlib import Path

from core.config import load_settings, BASE_DIR
from database.connection import DatabaseConnection
from database.repository import CatalogRepository
from services.catalog_service import CatalogService
from core.exceptions import CatalogUnavailable

logger = logging.getLogger("init_db")

SEED_FILE = BASE_DIR / "data" / "catalog.sql"


def init_database(db_path: str, seed_file: Path = SEED_FILE) -> bool:
    """Create the schema, run the seed script and verify the catalog loads"""
    if not seed_file.exists():
        logger.error("Seed file not found: %s", seed_file)
        return False

    db = DatabaseConnection(db_path)
    sql_content = seed_file.read_text(encoding="utf-8")

    with db.get_connection() as conn:
        conn.executescript(sql_content)
        conn.commit()

    try:
        catalog_service = CatalogService(CatalogRepository(db))
        catalog_service.load()
    except CatalogUnavailable as e:
        logger.error("Catalog failed to load after seeding: %s", e)
        return False

    logger.info("Categories: %d, items: %d",
                catalog_service.category_count(), catalog_service.total_item_count())
    return True


if __name__ == "__main__":
    settings = load_settings()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    print("=== Grocery catalog initialization ===")
    if init_database(str(settings.db_path)):
        print("\nCatalog ready. Start the bot with: python app.py")
    else:
        print("\nInitialization failed. Check data/catalog.sql.")
        sys.exit(1)
