"""
Food business logic.

Thin layer between the HTTP handlers and the SQL in `repository`: it turns
rows into `schemas.Food` and lets `StorageError` propagate to the app's
exception handler.
"""

from __future__ import annotations

import asyncpg

from . import repository, schemas


def _to_food(row: dict) -> schemas.Food:
    return schemas.Food(
        id=int(row["id"]),
        name=str(row["name"]),
        price=float(row["price"]),
    )


async def list_foods(pool: asyncpg.Pool) -> list[schemas.Food]:
    rows = await repository.list_foods(pool)
    return [_to_food(row) for row in rows]


async def create_food(pool: asyncpg.Pool, payload: schemas.CreateFoodRequest) -> schemas.Food:
    row = await repository.insert_food(pool, name=payload.name, price=payload.price)
    return _to_food(row)
