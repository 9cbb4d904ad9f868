"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUserResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    RequestIdentity,
    TokenResponse,
)
from app.schemas.categories import (
    CategoryRequest,
    CategoryResponse,
    CategoryTotal,
    CategoryTotalsResponse,
)
from app.schemas.expenses import (
    AdminExpenseRow,
    ExpenseCreateRequest,
    ExpenseResponse,
    ExpensesByUserResponse,
    ExpenseUpdateRequest,
    UserExpenseGroup,
)
from app.schemas.health import HealthResponse
from app.schemas.items import GroceryItemRequest, GroceryItemResponse
from app.schemas.report_settings import ReportSettingsRequest, ReportSettingsResponse

__all__ = [
    "AdminExpenseRow",
    "CategoryRequest",
    "CategoryResponse",
    "CategoryTotal",
    "CategoryTotalsResponse",
    "CurrentUserResponse",
    "ExpenseCreateRequest",
    "ExpenseResponse",
    "ExpenseUpdateRequest",
    "ExpensesByUserResponse",
    "GroceryItemRequest",
    "GroceryItemResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "ReportSettingsRequest",
    "ReportSettingsResponse",
    "RequestIdentity",
    "TokenResponse",
    "UserExpenseGroup",
]
