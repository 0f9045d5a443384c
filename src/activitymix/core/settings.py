"""
Backend settings accessor for activitymix.
Reads persisted settings from the local settings database.
"""

from typing import Any
import json
from enum import Enum
from ..storage.database import get_db_connection
from .config import DEFAULT_COLUMN_KEY


class LogLevel(str, Enum):
    """Log level options."""
    NONE = "none"
    ERROR = "error"
    DEBUG = "debug"


class BackendSettings:
    """Access persisted settings."""

    @staticmethod
    def get_setting(key: str, default: Any = None) -> Any:
        """Get a setting value from the settings database.

        Args:
            key: Setting key
            default: Default value if key not found or database unavailable

        Returns:
            Setting value or default
        """
        conn = None
        try:
            conn = get_db_connection()
            cursor = conn.cursor()
            cursor.execute('SELECT value FROM settings WHERE key = ?', (key,))
            row = cursor.fetchone()

            if row:
                value = row[0]
                try:
                    return json.loads(value) if value else None
                except (json.JSONDecodeError, TypeError):
                    return value
            return default
        except Exception:
            # If database is not available or table doesn't exist, return default
            return default
        finally:
            if conn:
                conn.close()

    @staticmethod
    def set_setting(key: str, value: Any) -> bool:
        """Persist a setting value. Returns False when the database is unavailable."""
        conn = None
        try:
            conn = get_db_connection()
            cursor = conn.cursor()
            cursor.execute('''
                INSERT OR REPLACE INTO settings (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
            ''', (key, json.dumps(value)))
            conn.commit()
            return True
        except Exception:
            return False
        finally:
            if conn:
                conn.close()

    @staticmethod
    def get_column_key() -> str:
        """Get the header name of the column holding activity titles."""
        value = BackendSettings.get_setting("column_key", DEFAULT_COLUMN_KEY)
        if not isinstance(value, str) or not value.strip():
            return DEFAULT_COLUMN_KEY
        return value.strip()

    @staticmethod
    def get_log_level() -> LogLevel:
        """Get the current log level from settings."""
        level = BackendSettings.get_setting("log_level", LogLevel.NONE.value)
        try:
            return LogLevel(level.lower())
        except (ValueError, AttributeError):
            return LogLevel.NONE

    @staticmethod
    def set_log_level(level: LogLevel) -> bool:
        """Set the log level in settings."""
        serialized_value = level.value if isinstance(level, LogLevel) else str(level)
        return BackendSettings.set_setting("log_level", serialized_value)
