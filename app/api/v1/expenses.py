"""Expense line items within the caller's categories."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.deps import CurrentIdentity, ResourceId
from app.core.database import get_db
from app.models import Category, Expense
from app.schemas.auth import MessageResponse
from app.schemas.expenses import (
    ExpenseCreateRequest,
    ExpenseResponse,
    ExpenseUpdateRequest,
)
from app.services.ownership import delete_owned, get_owned_or_404, owned, update_owned

router = APIRouter()


@router.get("/{category_id}", response_model=list[ExpenseResponse])
def list_expenses(
    category_id: ResourceId,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> list[Expense]:
    """List the caller's expenses in one of their categories. 404 for any other category."""
    get_owned_or_404(db, Category, category_id, identity, "Category")
    return (
        owned(db, Expense, identity)
        .filter(Expense.category_id == category_id)
        .order_by(Expense.id)
        .all()
    )


@router.post("", response_model=ExpenseResponse)
def create_expense(
    body: ExpenseCreateRequest,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> Expense:
    """Add an expense to one of the caller's categories."""
    get_owned_or_404(db, Category, body.category_id, identity, "Category")
    expense = Expense(
        user_id=identity.user_id,
        category_id=body.category_id,
        item=body.item.strip(),
        quantity=body.quantity,
        price=body.price,
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)
    return expense


@router.put("/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    expense_id: ResourceId,
    body: ExpenseUpdateRequest,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> Expense:
    return update_owned(
        db,
        Expense,
        expense_id,
        identity,
        "Expense",
        {"item": body.item.strip(), "quantity": body.quantity, "price": body.price},
    )


@router.delete("/{expense_id}", response_model=MessageResponse)
def delete_expense(
    expense_id: ResourceId,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    delete_owned(db, Expense, expense_id, identity, "Expense")
    return MessageResponse(message="Expense deleted successfully")
