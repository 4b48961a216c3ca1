"""Database connection pooling."""

import os
from contextlib import contextmanager
from typing import Any, Dict, Generator

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

_pools: Dict[str, ConnectionPool] = {}


def build_conninfo(config: Dict[str, Any]) -> str:
    """
    Build a libpq connection string from a postgres config dict.

    A password named by `password_env` takes precedence over a literal one.
    """
    password = config.get("password") or ""
    password_env = config.get("password_env")
    if password_env and os.environ.get(password_env):
        password = os.environ[password_env]

    return make_conninfo(
        host=config.get("host", "localhost"),
        port=config.get("port", 5432),
        dbname=config.get("database", "bytesummary"),
        user=config.get("user", "bytesummary"),
        password=password or None,
    )


def get_connection_pool(config: Dict[str, Any]) -> ConnectionPool:
    """Get or create the pool for a database."""
    conninfo = build_conninfo(config)
    pool = _pools.get(conninfo)
    if pool is None:
        pool = ConnectionPool(
            conninfo,
            min_size=1,
            max_size=config.get("pool_max_size", 10),
            kwargs={"row_factory": dict_row},
            open=True,
        )
        _pools[conninfo] = pool
    return pool


@contextmanager
def get_connection(config: Dict[str, Any]) -> Generator[psycopg.Connection, None, None]:
    """Borrow a connection from the pool."""
    pool = get_connection_pool(config)
    with pool.connection() as conn:
        yield conn


def close_connection_pools() -> None:
    """Close every open pool."""
    while _pools:
        _, pool = _pools.popitem()
        pool.close()
