"""Schemas for expense categories and per-category totals."""

from pydantic import BaseModel, ConfigDict, Field


class CategoryRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Category name")


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    user_id: int


class CategoryTotal(BaseModel):
    """Spend within one category: sum of price * quantity over its expenses."""

    id: int
    name: str
    expense_count: int
    total: float


class CategoryTotalsResponse(BaseModel):
    categories: list[CategoryTotal]
    total: float
