"""
Database repository classes
"""
from typing import List, Optional, Dict, Any

from models.order import Order
from .connection import DatabaseConnection


class CatalogRepository:
    # Read access to the Categories and Items tables

    def __init__(self, db_connection: DatabaseConnection):
        self.db = db_connection

    def get_category_rows(self) -> List[Dict[str, Any]]:
        # Categories ordered by numeric key, non-numeric keys last
        with self.db.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
            SELECT category_id, name, emoji
            FROM Categories
            ORDER BY CAST(category_id AS INTEGER), category_id
            """)

            return [
                {"id": row[0], "name": row[1], "emoji": row[2]}
                for row in cursor.fetchall()
            ]

    def get_item_rows(self) -> List[Dict[str, Any]]:
        # Items in insertion order
        with self.db.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
            SELECT item_id, name, category_id, price, unit
            FROM Items
            ORDER BY rowid
            """)

            return [
                {
                    "id": row[0],
                    "name": row[1],
                    "category_id": row[2],
                    "price": row[3],
                    "unit": row[4]
                }
                for row in cursor.fetchall()
            ]


class OrderRepository:
    # Order data access (create and lookup)

    def __init__(self, db_connection: DatabaseConnection):
        self.db = db_connection

    def create_order(self, order: Order):
        # Insert the order row; sqlite errors propagate to the caller
        with self.db.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
            INSERT INTO Orders (
                order_id, customer_name, customer_phone, items_summary,
                total_amount, status, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """, (
                order.order_id, order.customer_name, order.customer_phone,
                order.items_summary, order.total_amount, order.status.value,
                order.created_at
            ))

            conn.commit()

    def get_order(self, order_id: str) -> Optional[Dict[str, Any]]:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
            SELECT order_id, customer_name, customer_phone, items_summary,
                   total_amount, status, created_at
            FROM Orders WHERE order_id = ?
            """, (order_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return {
                "order_id": row[0],
                "customer_name": row[1],
                "customer_phone": row[2],
                "items_summary": row[3],
                "total_amount": row[4],
                "status": row[5],
                "created_at": row[6]
            }

    def count_orders(self) -> int:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) FROM Orders")
            return cursor.fetchone()[0]
