"""Admin-only cross-user expense views. Gated on the token's role claim."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.deps import AdminIdentity
from app.core.database import get_db
from app.schemas.expenses import AdminExpenseRow, ExpensesByUserResponse
from app.services.expense_reports import all_expense_rows, group_by_user

router = APIRouter()


@router.get("", response_model=list[AdminExpenseRow])
def get_all_expenses(
    _admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> list[AdminExpenseRow]:
    """Every user's expenses with username, category name and line total."""
    return all_expense_rows(db)


@router.get("/by-user", response_model=ExpensesByUserResponse)
def get_all_expenses_by_user(
    _admin: AdminIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> ExpensesByUserResponse:
    """Every user's expenses grouped by username, with per-user and overall totals."""
    return group_by_user(all_expense_rows(db))
