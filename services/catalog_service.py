"""
Catalog service - loads the read-only catalog and answers lookups
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Any, Optional

from models.catalog import Item, Category, Catalog
from database.repository import CatalogRepository
from core.exceptions import CatalogUnavailable

logger = logging.getLogger(__name__)

DEFAULT_EMOJI = "📦"


class CatalogService:
    # Catalog Store: loaded once, then served from memory

    def __init__(self, catalog_repository: CatalogRepository):
        self.catalog_repo = catalog_repository
        self._catalog: Optional[Catalog] = None
        self._failure_reported = False

    def load(self) -> Catalog:
        """Build the catalog from the repository rows.

        Raises CatalogUnavailable when the source cannot be read or holds no
        categories. Items pointing at an unknown category, or carrying a
        price that is not a non-negative number, are skipped.
        """
        try:
            category_rows = self.catalog_repo.get_category_rows()
            item_rows = self.catalog_repo.get_item_rows()
        except Exception as e:
            raise CatalogUnavailable(f"catalog source unreachable: {e}") from e

        if not category_rows:
            raise CatalogUnavailable("catalog source has no categories")

        items_by_category: Dict[str, List[Item]] = {str(row["id"]): [] for row in category_rows}
        for row in item_rows:
            category_id = str(row["category_id"])
            if category_id not in items_by_category:
                logger.warning("Skipping item %s: unknown category %s", row["id"], category_id)
                continue

            price = self._parse_price(row["price"])
            if price is None:
                logger.warning("Skipping item %s: invalid price %r", row["id"], row["price"])
                continue

            items_by_category[category_id].append(Item(
                item_id=str(row["id"]),
                name=row["name"],
                price=price,
                unit=row["unit"]
            ))

        categories = {}
        for row in category_rows:
            key = str(row["id"])
            categories[key] = Category(
                key=key,
                name=row["name"],
                emoji=row["emoji"] or DEFAULT_EMOJI,
                items=tuple(items_by_category[key])
            )

        self._catalog = Catalog(categories=categories)
        logger.info("Catalog loaded: %d categories, %d items",
                    self.category_count(), self.total_item_count())
        return self._catalog

    def ensure_loaded(self) -> bool:
        # Lazy load before first use; False means the catalog is degraded
        if self._catalog is not None:
            return True
        try:
            self.load()
            return True
        except CatalogUnavailable as e:
            # Reported once; later retries stay quiet until a load succeeds
            if not self._failure_reported:
                logger.error("Catalog not available: %s", e)
                self._failure_reported = True
            else:
                logger.debug("Catalog still not available: %s", e)
            return False

    @property
    def is_available(self) -> bool:
        return self._catalog is not None

    def get_category(self, key: str) -> Optional[Category]:
        if self._catalog is None:
            return None
        return self._catalog.get(key)

    def category_keys(self) -> List[str]:
        if self._catalog is None:
            return []
        return self._catalog.keys()

    def categories(self) -> List[Category]:
        return [self._catalog.get(key) for key in self.category_keys()]

    def category_count(self) -> int:
        return len(self.category_keys())

    def total_item_count(self) -> int:
        if self._catalog is None:
            return 0
        return self._catalog.total_item_count()

    def get_status(self) -> Dict[str, Any]:
        # Connectivity summary for health checks
        return {
            "available": self.is_available,
            "categories": self.category_count(),
            "items": self.total_item_count()
        }

    @staticmethod
    def _parse_price(value) -> Optional[Decimal]:
        try:
            price = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return None
        if not price.is_finite() or price < 0:
            return None
        return price
