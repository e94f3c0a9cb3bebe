"""Pytest configuration and shared fixtures."""

import sqlite3
from typing import Any, Dict, Iterator

import pytest

from sqlfrag import ABSENT, sql


@pytest.fixture
def user_row() -> Dict[str, Any]:
    """A row as application code would hand it to sql.insert()/sql.set()."""
    return {
        "name": "Ada",
        "email": "ada@example.com",
        "nickname": ABSENT,
        "active": 1,
    }


@pytest.fixture
def or_glue():
    """Glue fragment for OR-joined conditions."""
    return sql(" or ")


@pytest.fixture
def sqlite_connection() -> Iterator[sqlite3.Connection]:
    """
    In-memory SQLite database with a users table.

    sqlite3 uses the same "?" placeholder style the fragments produce, so
    fragments can be executed as-is via as_tuple().
    """
    connection = sqlite3.connect(":memory:")
    connection.execute(
        'create table "users" ('
        '"id" integer primary key, '
        '"name" text not null, '
        '"email" text, '
        '"nickname" text, '
        '"active" integer not null default 0, '
        '"avatar" blob'
        ")"
    )
    yield connection
    connection.close()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: runs fragments against a real database driver")
