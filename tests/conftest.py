"""Pytest configuration and fixtures for project-graph-data."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from arango.exceptions import (
    ArangoServerError,
    CollectionCreateError,
    DatabaseCreateError,
    DocumentInsertError,
)

# ArangoDB error numbers used by the fake server
DUPLICATE_NAME = 1207
UNIQUE_CONSTRAINT_VIOLATED = 1210


def make_server_error(
    error_cls: type[ArangoServerError],
    error_code: int,
    message: str = "fake server error",
) -> ArangoServerError:
    """Build a python-arango server error without a live HTTP response."""
    resp = MagicMock()
    resp.error_code = error_code
    resp.error_message = message
    resp.status_code = 409
    resp.status_text = "Conflict"
    resp.url = "http://fake-arango:8529"
    resp.method = "post"
    resp.headers = {}
    return error_cls(resp, MagicMock())


# ============================================================================
# In-memory ArangoDB
# ============================================================================


class FakeCollection:
    """Document collection holding documents by ``_key``."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.documents: dict[str, dict[str, Any]] = {}
        self.truncate_calls = 0

    def truncate(self) -> bool:
        self.documents.clear()
        self.truncate_calls += 1
        return True

    def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        key = document["_key"]
        if key in self.documents:
            raise make_server_error(
                DocumentInsertError,
                UNIQUE_CONSTRAINT_VIOLATED,
                f"unique constraint violated - in index primary of type primary over '_key'; conflicting key: {key}",
            )
        self.documents[key] = dict(document)
        return {"_id": f"{self.name}/{key}", "_key": key, "_rev": "1"}

    def count(self) -> int:
        return len(self.documents)

    def all(self) -> Iterator[dict[str, Any]]:
        return iter([dict(doc) for doc in self.documents.values()])


class FakeDatabase:
    """Database handle bound to one database of a FakeArangoClient."""

    def __init__(self, client: FakeArangoClient, name: str) -> None:
        self.client = client
        self.name = name

    @property
    def _collections(self) -> dict[str, FakeCollection]:
        return self.client.databases[self.name]

    def has_database(self, name: str) -> bool:
        return name in self.client.databases

    def create_database(self, name: str, users: list[dict[str, Any]] | None = None) -> bool:
        if name in self.client.databases:
            raise make_server_error(DatabaseCreateError, DUPLICATE_NAME, "duplicate database name")
        self.client.databases[name] = {}
        self.client.users[name] = list(users or [])
        return True

    def has_collection(self, name: str) -> bool:
        return name in self._collections

    def create_collection(self, name: str) -> FakeCollection:
        if name in self._collections:
            raise make_server_error(CollectionCreateError, DUPLICATE_NAME, "duplicate name")
        self._collections[name] = FakeCollection(name)
        return self._collections[name]

    def collection(self, name: str) -> FakeCollection:
        return self._collections[name]


class FakeArangoClient:
    """Stand-in for ``arango.ArangoClient`` keeping all state in memory."""

    def __init__(self) -> None:
        self.databases: dict[str, dict[str, FakeCollection]] = {"_system": {}}
        self.users: dict[str, list[dict[str, Any]]] = {}
        self.connections: list[tuple[str, str | None]] = []
        self.closed = False

    def db(
        self,
        name: str = "_system",
        username: str = "root",
        password: str = "",
    ) -> FakeDatabase:
        self.connections.append((name, username))
        return FakeDatabase(self, name)

    def close(self) -> None:
        self.closed = True

    def snapshot(self, database: str) -> dict[str, dict[str, dict[str, Any]]]:
        """Copy of every document in ``database`` per collection."""
        return {
            name: {key: dict(doc) for key, doc in collection.documents.items()}
            for name, collection in self.databases[database].items()
        }


# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def scripts_dir(project_root: Path) -> Path:
    """Return the scripts directory."""
    return project_root / "scripts"


@pytest.fixture
def docker_dir(project_root: Path) -> Path:
    """Return the docker directory."""
    return project_root / "docker"


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
def arango_client() -> FakeArangoClient:
    """Return an empty in-memory ArangoDB client."""
    return FakeArangoClient()


@pytest.fixture
def server_error() -> Callable[..., ArangoServerError]:
    """Factory fixture building python-arango server errors."""
    return make_server_error


@pytest.fixture
def clean_arango_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ARANGO_* variables so defaults apply."""
    for name in list(os.environ):
        if name.startswith("ARANGO_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def arango_connection_params() -> dict[str, str]:
    """Return ArangoDB connection parameters for integration tests."""
    return {
        "hosts": os.getenv("ARANGO_HOSTS", "http://localhost:8529"),
        "auth": os.getenv("ARANGO_AUTH", "root/arango2rdb"),
    }


# ============================================================================
# Markers
# ============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (deselect with '-m \"not integration\"')",
    )
    config.addinivalue_line(
        "markers",
        "requires_arango: marks tests requiring an ArangoDB connection",
    )
