"""Common runtime devkit for service infrastructure concerns."""

from devkit.config import DEFAULT_DATABASE_URL, ServiceSettings, load_settings
from devkit.db import (
    AsyncDatabaseManager,
    Base,
    create_all_tables,
    create_async_engine,
    create_session_factory,
    is_sqlite_url,
    normalize_database_url,
)
from devkit.observability import configure_logging, configure_otel, configure_probe_access_log_filter

__all__ = [
    "AsyncDatabaseManager",
    "Base",
    "DEFAULT_DATABASE_URL",
    "ServiceSettings",
    "configure_logging",
    "configure_otel",
    "configure_probe_access_log_filter",
    "create_all_tables",
    "create_async_engine",
    "create_session_factory",
    "is_sqlite_url",
    "load_settings",
    "normalize_database_url",
]
