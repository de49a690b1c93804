"""
Pydantic schemas for food endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

DEFAULT_NAME = ""
DEFAULT_PRICE = 0.0


class CreateFoodRequest(BaseModel):
    """
    Lenient create payload.

    Missing or wrongly typed fields fall back to their defaults instead of
    rejecting the request:
    - name  -> ""
    - price -> 0.0
    """

    name: str = DEFAULT_NAME
    price: float = DEFAULT_PRICE

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_default(cls, value: Any) -> str:
        return value if isinstance(value, str) else DEFAULT_NAME

    @field_validator("price", mode="before")
    @classmethod
    def _price_or_default(cls, value: Any) -> float:
        # bool is an int subclass but not a JSON number.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return DEFAULT_PRICE
        try:
            return float(value)
        except OverflowError:
            return DEFAULT_PRICE


class Food(BaseModel):
    id: int
    name: str
    price: float
