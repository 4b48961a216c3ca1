"""Storage for ByteSummary."""

from .blogs import BlogStorage, generate_blog_id
from .connection import close_connection_pools, get_connection, get_connection_pool
from .init import init_database, validate_connection
from .jobs import JobStatusRepository
from .sources import SourceManager
from .store import KeyValueStore, MemoryStore, PostgresStore, create_store

__all__ = [
    "BlogStorage",
    "JobStatusRepository",
    "KeyValueStore",
    "MemoryStore",
    "PostgresStore",
    "SourceManager",
    "close_connection_pools",
    "create_store",
    "generate_blog_id",
    "get_connection",
    "get_connection_pool",
    "init_database",
    "validate_connection",
]
