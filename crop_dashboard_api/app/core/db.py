"""
SQLite integration for the listings store.

The store schema (``store_product`` and ``app_userprofile``) is owned
by the marketplace that writes it; this application is a read-only
consumer.  ``ListingStore`` wraps the single connection shared by all
requests.  It is created by the application factory, kept on
``app.state`` and handed to route handlers through the ``get_store``
dependency, so nothing looks the connection up globally.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path
from typing import Any, List, Optional, Sequence

from fastapi import Request


logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


class StoreError(Exception):
    """Base class for listings store failures."""


class StoreUnavailableError(StoreError):
    """The store could not be opened."""


class StoreQueryError(StoreError):
    """A read against the store failed."""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative paths are resolved against
    the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    return str((PROJECT_ROOT / database_url).resolve())


class ListingStore:
    """Owner of the shared read-only SQLite connection."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Open the connection in read-only mode.

        ``mode=ro`` makes a missing file an error instead of silently
        creating an empty database.  The connection is shared between
        the server's worker threads, hence ``check_same_thread=False``;
        SQLite serialises the reads itself.
        """
        if self._conn is not None:
            return
        uri = f"{Path(self.path).resolve().as_uri()}?mode=ro"
        try:
            conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
        except sqlite3.Error as e:
            logger.error("Error connecting to %s: %s", self.path, e)
            raise StoreUnavailableError(str(e)) from e
        conn.row_factory = sqlite3.Row
        self._conn = conn
        logger.info("Connected to %s", self.path)

    def close(self) -> bool:
        """Close the connection.

        Returns ``True`` when the store ended up closed (including when
        it was never open) and ``False`` when closing failed.  Failures
        are logged, not raised.
        """
        if self._conn is None:
            return True
        conn, self._conn = self._conn, None
        try:
            conn.close()
        except sqlite3.Error as e:
            logger.error("Error closing database: %s", e)
            return False
        logger.info("Database connection closed")
        return True

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[sqlite3.Row]:
        """Run a single read query and return all rows."""
        if self._conn is None:
            raise StoreQueryError("database connection is not open")
        try:
            return self._conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as e:
            raise StoreQueryError(str(e)) from e


def get_store(request: Request) -> ListingStore:
    """FastAPI dependency returning the store owned by the application."""
    return request.app.state.store
