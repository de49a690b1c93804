"""
Food API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core import db

from . import schemas, service

router = APIRouter()


@router.get("/foods", response_model=list[schemas.Food])
async def get_all_foods(
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[schemas.Food]:
    return await service.list_foods(pool)


@router.post("/foods", response_model=schemas.Food)
async def create_food(
    request: schemas.CreateFoodRequest,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.Food:
    return await service.create_food(pool, request)
