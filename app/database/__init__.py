"""
Database Module

Async engine and session management for PostgreSQL.
"""

from app.database.async_db import (
    check_database_connection,
    create_async_database_engine,
    dispose_async_engine,
    engine_options,
    get_async_database_url,
    get_async_db,
    get_async_engine,
    get_session_factory,
    session_scope,
)

__all__ = [
    "check_database_connection",
    "create_async_database_engine",
    "dispose_async_engine",
    "engine_options",
    "get_async_database_url",
    "get_async_db",
    "get_async_engine",
    "get_session_factory",
    "session_scope",
]
