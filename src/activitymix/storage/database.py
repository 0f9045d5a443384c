"""
Database connection utilities for activitymix settings storage.
"""

import sqlite3
import os
import logging
from pathlib import Path

from ..core.config import DB_PATH_ENV_VAR, DEFAULT_DB_DIRNAME, DEFAULT_DB_FILENAME

logger = logging.getLogger(__name__)


def get_db_path():
    """
    Get the database file path.

    The ACTIVITYMIX_DB_PATH environment variable overrides the default
    location under the user's home directory.

    Returns:
        str: Path to the database file
    """
    override = os.environ.get(DB_PATH_ENV_VAR)
    if override:
        db_path = Path(override).expanduser()
    else:
        db_path = Path.home() / DEFAULT_DB_DIRNAME / DEFAULT_DB_FILENAME
    logger.debug(f"Settings database path: {db_path}")
    return str(db_path)


def initialize_database(conn):
    """Create the settings table if it does not exist yet."""
    conn.execute('''
        CREATE TABLE IF NOT EXISTS settings (
            key TEXT PRIMARY KEY,
            value TEXT,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')
    conn.commit()


def get_db_connection():
    """
    Get a SQLite database connection with the settings schema in place.

    Returns:
        sqlite3.Connection: Database connection object
    """
    db_path = get_db_path()
    storage_dir = Path(db_path).parent

    try:
        storage_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create storage directory: {e}")
        raise

    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    initialize_database(conn)
    return conn
