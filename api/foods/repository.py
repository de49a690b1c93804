"""
Food persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db


async def list_foods(pool: asyncpg.Pool) -> list[dict]:
    return await db.fetch_all(
        pool,
        """
        SELECT id, name, price
        FROM food
        ORDER BY id ASC
        """,
    )


async def insert_food(pool: asyncpg.Pool, *, name: str, price: float) -> dict:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO food (name, price)
        VALUES ($1, $2)
        RETURNING id, name, price
        """,
        name,
        price,
    )
    if row is None:
        raise db.StorageError("Failed to insert food.")
    return row
