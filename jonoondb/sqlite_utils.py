"""Helpers for opening and managing SQLite connections."""

from __future__ import annotations

import os
import sqlite3
import time

from .exceptions import (
    InvalidArgumentException,
    MissingDatabaseFileException,
    MissingDatabaseFolderException,
    SQLException,
)
from .text import normalize_path

__all__ = [
    "BUSY_RETRY_INTERVAL_SECONDS",
    "BUSY_RETRY_COUNT",
    "normalize_path_and_connect",
    "close_connection",
    "busy_handler",
]

BUSY_RETRY_INTERVAL_SECONDS = 0.2
BUSY_RETRY_COUNT = 20


def normalize_path_and_connect(
    db_path: str, db_name: str, create_db_if_missing: bool
) -> tuple[sqlite3.Connection, str]:
    """Open ``<db_path>/<db_name>.dat`` and return the connection and normalized folder path."""
    if not db_path:
        raise InvalidArgumentException(
            "Argument dbPath is empty.", __file__, "normalize_path_and_connect", 0
        )
    if not db_name:
        raise InvalidArgumentException(
            "Argument dbName is empty.", __file__, "normalize_path_and_connect", 0
        )

    normalized = normalize_path(db_path)
    if not os.path.exists(normalized):
        raise MissingDatabaseFolderException(
            f"Database folder {normalized} does not exist.",
            __file__,
            "normalize_path_and_connect",
            0,
        )

    db_file = f"{normalized}{db_name}.dat"
    if not os.path.exists(db_file) and not create_db_if_missing:
        raise MissingDatabaseFileException(
            f"Database file {db_file} does not exist.",
            __file__,
            "normalize_path_and_connect",
            0,
        )

    try:
        connection = sqlite3.connect(db_file)
    except sqlite3.Error as exc:
        raise SQLException(str(exc), __file__, "normalize_path_and_connect", 0) from exc
    return connection, normalized


def close_connection(connection: sqlite3.Connection | None) -> None:
    """Close a connection if there is one; errors on close are ignored."""
    if connection is None:
        return
    try:
        connection.close()
    except sqlite3.Error:
        pass


def busy_handler(retry_count: int) -> bool:
    """Wait before a retry; tell whether another attempt should be made."""
    if retry_count > BUSY_RETRY_COUNT:
        return False
    time.sleep(BUSY_RETRY_INTERVAL_SECONDS)
    return True