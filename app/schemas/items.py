"""Schemas for grocery list items."""

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import MAX_INTEGER, PRICE_LIMIT


class GroceryItemRequest(BaseModel):
    item_name: str = Field(..., min_length=1, max_length=255)
    quantity: int = Field(..., gt=0, le=MAX_INTEGER)
    price: float = Field(..., ge=0, lt=PRICE_LIMIT, allow_inf_nan=False)


class GroceryItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    item_name: str
    quantity: int
    price: float
