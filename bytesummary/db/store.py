"""Key-value store backends.

Every record the service keeps (blog entries, the blog index, the job status
and user sources) lives under a string key with an optional time-to-live.
Values are plain JSON-compatible Python objects.
"""

import json
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

import pendulum
import psycopg
from psycopg.types.json import Jsonb

from ..errors import StoreError
from .connection import get_connection


class KeyValueStore(ABC):
    """Abstract key-value store with per-key expiry."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the decoded value for key, or None if missing or expired."""
        pass

    @abstractmethod
    def put(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """
        Store value under key.

        Args:
            key: Record key
            value: JSON-compatible value
            ttl: Seconds until the record expires; None keeps it forever
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete key if present."""
        pass

    @abstractmethod
    def list_keys(self, prefix: str = "") -> List[str]:
        """List live keys starting with prefix, sorted."""
        pass


class MemoryStore(KeyValueStore):
    """In-process store, used for local runs and tests."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._data: Dict[str, Tuple[str, Optional[datetime]]] = {}
        self._clock = clock or (lambda: pendulum.now("UTC"))

    def _is_live(self, key: str) -> bool:
        record = self._data.get(key)
        if record is None:
            return False
        expires_at = record[1]
        if expires_at is not None and expires_at <= self._clock():
            del self._data[key]
            return False
        return True

    def get(self, key: str) -> Optional[Any]:
        if not self._is_live(key):
            return None
        return json.loads(self._data[key][0])

    def put(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        expires_at = None
        if ttl is not None:
            expires_at = self._clock() + pendulum.duration(seconds=ttl)
        # Serialize on write so callers never share mutable state with the store
        self._data[key] = (json.dumps(value), expires_at)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def list_keys(self, prefix: str = "") -> List[str]:
        return sorted(k for k in list(self._data) if k.startswith(prefix) and self._is_live(k))


class PostgresStore(KeyValueStore):
    """Store backed by the kv_store table."""

    def __init__(self, db_config: Dict[str, Any]) -> None:
        """
        Initialize Postgres store.

        Args:
            db_config: Connection settings as returned by Config.get_db_config()
        """
        self.db_config = db_config

    def get(self, key: str) -> Optional[Any]:
        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        SELECT value FROM kv_store
                        WHERE key = %s
                          AND (expires_at IS NULL OR expires_at > CURRENT_TIMESTAMP)
                        """,
                        (key,),
                    )
                    row = cur.fetchone()
                    return row["value"] if row else None
        except psycopg.Error as e:
            raise StoreError(f"Failed to read {key}: {e}") from e

    def put(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO kv_store (key, value, expires_at)
                        VALUES (
                            %s, %s,
                            CASE WHEN %s::int IS NULL THEN NULL
                                 ELSE CURRENT_TIMESTAMP + %s::int * INTERVAL '1 second' END
                        )
                        ON CONFLICT (key) DO UPDATE SET
                            value = EXCLUDED.value,
                            expires_at = EXCLUDED.expires_at
                        """,
                        (key, Jsonb(value), ttl, ttl),
                    )
                conn.commit()
        except psycopg.Error as e:
            raise StoreError(f"Failed to write {key}: {e}") from e

    def delete(self, key: str) -> None:
        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    cur.execute("DELETE FROM kv_store WHERE key = %s", (key,))
                conn.commit()
        except psycopg.Error as e:
            raise StoreError(f"Failed to delete {key}: {e}") from e

    def list_keys(self, prefix: str = "") -> List[str]:
        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    # Expired rows are purged here rather than by a background job
                    cur.execute(
                        "DELETE FROM kv_store WHERE expires_at IS NOT NULL AND expires_at <= CURRENT_TIMESTAMP"
                    )
                    cur.execute(
                        "SELECT key FROM kv_store WHERE starts_with(key, %s) ORDER BY key",
                        (prefix,),
                    )
                    keys = [row["key"] for row in cur.fetchall()]
                conn.commit()
                return keys
        except psycopg.Error as e:
            raise StoreError(f"Failed to list keys with prefix {prefix!r}: {e}") from e


def create_store(config) -> KeyValueStore:
    """Build the store selected by configuration."""
    if config.config.store.backend == "memory":
        return MemoryStore()
    return PostgresStore(config.get_db_config())
