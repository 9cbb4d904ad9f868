"""Schemas for expense line items, including the admin cross-user view."""

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import MAX_INTEGER, PRICE_LIMIT


class ExpenseUpdateRequest(BaseModel):
    item: str = Field(..., min_length=1, max_length=255, description="Item name")
    quantity: int = Field(..., gt=0, le=MAX_INTEGER, description="Number of units")
    price: float = Field(
        ..., ge=0, lt=PRICE_LIMIT, allow_inf_nan=False, description="Unit price"
    )


class ExpenseCreateRequest(ExpenseUpdateRequest):
    category_id: int = Field(
        ..., le=MAX_INTEGER, description="Owning category (must belong to the caller)"
    )


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: int
    user_id: int
    item: str
    quantity: int
    price: float


class AdminExpenseRow(BaseModel):
    """One expense from any user, joined with its owner and category names."""

    id: int
    user_id: int
    username: str
    category_id: int
    category_name: str
    item: str
    quantity: int
    price: float
    total_cost: float


class UserExpenseGroup(BaseModel):
    username: str
    expenses: list[AdminExpenseRow]
    total: float


class ExpensesByUserResponse(BaseModel):
    users: list[UserExpenseGroup]
    total: float
