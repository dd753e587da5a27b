"""
Database connection management
"""
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator


class DatabaseConnection:
    # Owns the sqlite file holding the catalog and the orders table

    def __init__(self, db_path: str = "data/grocery.db"):
        # Remember the file location and make sure the schema exists
        self.db_path = str(db_path)
        self.init_database()

    def init_database(self):
        # Create the catalog and order tables when missing
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        with self.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute('''
            CREATE TABLE IF NOT EXISTS Categories (
                category_id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                emoji TEXT
            )
            ''')

            cursor.execute('''
            CREATE TABLE IF NOT EXISTS Items (
                item_id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                category_id TEXT NOT NULL,
                price TEXT NOT NULL,
                unit TEXT NOT NULL,
                FOREIGN KEY(category_id) REFERENCES Categories(category_id)
            )
            ''')

            # One row per confirmed order, items kept as a readable summary
            cursor.execute('''
            CREATE TABLE IF NOT EXISTS Orders (
                order_id TEXT PRIMARY KEY,
                customer_name TEXT,
                customer_phone TEXT,
                items_summary TEXT NOT NULL,
                total_amount INTEGER NOT NULL,
                status TEXT DEFAULT 'pending',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            ''')

            conn.commit()

    @contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        # Open a connection for the duration of the with-block
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
        finally:
            conn.close()
