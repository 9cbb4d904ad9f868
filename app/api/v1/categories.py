"""Expense categories: owner-scoped CRUD and per-category spend totals."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.deps import CurrentIdentity, ResourceId
from app.core.database import get_db
from app.models import Category
from app.schemas.auth import MessageResponse
from app.schemas.categories import (
    CategoryRequest,
    CategoryResponse,
    CategoryTotalsResponse,
)
from app.services.expense_reports import category_totals
from app.services.ownership import delete_owned, owned, update_owned

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> list[Category]:
    """List the caller's categories."""
    return owned(db, Category, identity).order_by(Category.id).all()


@router.post("", response_model=CategoryResponse)
def create_category(
    body: CategoryRequest,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> Category:
    category = Category(user_id=identity.user_id, name=body.name.strip())
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@router.get("/totals", response_model=CategoryTotalsResponse)
def get_category_totals(
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> CategoryTotalsResponse:
    """Spend per category (sum of price * quantity) and the overall total."""
    return category_totals(db, identity)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: ResourceId,
    body: CategoryRequest,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> Category:
    """Rename a category. 404 if it does not exist or is not the caller's."""
    return update_owned(
        db, Category, category_id, identity, "Category", {"name": body.name.strip()}
    )


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: ResourceId,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a category and its expenses."""
    delete_owned(db, Category, category_id, identity, "Category")
    return MessageResponse(message="Category deleted successfully")
