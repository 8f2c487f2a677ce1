# tests/fixtures.py

"""Helpers that build throwaway listings databases for the tests."""

import sqlite3
from pathlib import Path
from typing import Iterable, Tuple

SCHEMA = """
    CREATE TABLE app_userprofile (
        id INTEGER PRIMARY KEY,
        state TEXT
    );
    CREATE TABLE store_product (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        product_name TEXT,
        price NUMERIC NOT NULL,
        farmerID INTEGER
    );
"""

# (seller id, state)
WHEAT_SELLERS = [(1, "North"), (2, "North"), (3, "South")]
# (product name, price, seller id)
WHEAT_LISTINGS = [("wheat", 10, 1), ("wheat", 20, 2), ("wheat", 15, 3)]


def build_listings_db(
    path: Path,
    sellers: Iterable[Tuple[int, str]],
    listings: Iterable[Tuple[str, float, int]],
) -> Path:
    """Create a SQLite file with the marketplace tables and given rows."""
    conn = sqlite3.connect(path)
    try:
        conn.executescript(SCHEMA)
        conn.executemany(
            "INSERT INTO app_userprofile (id, state) VALUES (?, ?)",
            list(sellers),
        )
        conn.executemany(
            "INSERT INTO store_product (product_name, price, farmerID) VALUES (?, ?, ?)",
            list(listings),
        )
        conn.commit()
    finally:
        conn.close()
    return path


def build_empty_db(path: Path) -> Path:
    """Create a SQLite file without the marketplace tables."""
    conn = sqlite3.connect(path)
    try:
        conn.execute("CREATE TABLE unrelated (id INTEGER PRIMARY KEY)")
        conn.commit()
    finally:
        conn.close()
    return path
