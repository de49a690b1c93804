"""Shared test fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass, field
from typing import Any

import asyncpg
import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from core import db
from main import create_app


@dataclass
class FakePool:
    """In-memory stand-in for the asyncpg pool backing the `food` table."""

    rows: list[dict[str, Any]] = field(default_factory=list)
    next_id: int = 1
    statements: list[str] = field(default_factory=list)
    closed: bool = False

    async def fetch(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self.statements.append(sql)
        await asyncio.sleep(0)
        return [dict(row) for row in sorted(self.rows, key=lambda row: row["id"])]

    async def fetchrow(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self.statements.append(sql)
        name, price = args
        # Let concurrent requests interleave like a real round trip would.
        await asyncio.sleep(0)
        row = {"id": self.next_id, "name": name, "price": price}
        self.next_id += 1
        self.rows.append(row)
        return dict(row)

    async def close(self) -> None:
        self.closed = True


@dataclass
class FailingPool:
    """Pool whose connection has gone away."""

    error: Exception = field(
        default_factory=lambda: asyncpg.InterfaceError(
            "connection was closed in the middle of operation"
        )
    )

    async def fetch(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        raise self.error

    async def fetchrow(self, sql: str, *args: Any) -> dict[str, Any] | None:
        raise self.error


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest.fixture
def failing_pool() -> FailingPool:
    return FailingPool()


def _app_with_pool(pool: object) -> FastAPI:
    app = create_app()
    app.dependency_overrides[db.get_pool] = lambda: pool
    return app


@pytest.fixture
def client(fake_pool: FakePool) -> Iterator[TestClient]:
    yield TestClient(_app_with_pool(fake_pool))


@pytest.fixture
def failing_client(failing_pool: FailingPool) -> Iterator[TestClient]:
    yield TestClient(_app_with_pool(failing_pool))


@pytest_asyncio.fixture
async def async_client(fake_pool: FakePool) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=_app_with_pool(fake_pool))
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
