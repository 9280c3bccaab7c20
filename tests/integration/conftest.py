"""Integration test configuration.

Integration tests run against the PostgreSQL database named by
``DATABASE__URL`` with the schema already migrated
(``python scripts/run_migrations.py``). They are skipped when the database
cannot be reached.
"""

import socket

import pytest
from sqlalchemy.engine import make_url

from forum.config import Settings


def _database_reachable() -> bool:
    url = make_url(Settings().database_url)
    try:
        with socket.create_connection((url.host or "localhost", url.port or 5432), 1):
            return True
    except OSError:
        return False


def pytest_collection_modifyitems(config, items):
    integration_items = [item for item in items if "integration" in item.keywords]
    if not integration_items or _database_reachable():
        return

    skip = pytest.mark.skip(reason="PostgreSQL is not reachable")
    for item in integration_items:
        item.add_marker(skip)
