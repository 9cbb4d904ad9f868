"""Grocery list: owner-scoped CRUD over the caller's items."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.deps import CurrentIdentity, ResourceId
from app.core.database import get_db
from app.models import GroceryItem
from app.schemas.auth import MessageResponse
from app.schemas.items import GroceryItemRequest, GroceryItemResponse
from app.services.ownership import delete_owned, owned, update_owned

router = APIRouter()


@router.get("", response_model=list[GroceryItemResponse])
def list_items(
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> list[GroceryItem]:
    return owned(db, GroceryItem, identity).order_by(GroceryItem.id).all()


@router.post("", response_model=GroceryItemResponse, status_code=status.HTTP_201_CREATED)
def add_item(
    body: GroceryItemRequest,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> GroceryItem:
    item = GroceryItem(
        user_id=identity.user_id,
        item_name=body.item_name.strip(),
        quantity=body.quantity,
        price=body.price,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@router.put("/{item_id}", response_model=GroceryItemResponse)
def update_item(
    item_id: ResourceId,
    body: GroceryItemRequest,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> GroceryItem:
    """Replace an item's fields. 404 if missing or not the caller's."""
    return update_owned(
        db,
        GroceryItem,
        item_id,
        identity,
        "Item",
        {"item_name": body.item_name.strip(), "quantity": body.quantity, "price": body.price},
    )


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_item(
    item_id: ResourceId,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    delete_owned(db, GroceryItem, item_id, identity, "Item")
    return MessageResponse(message="Item deleted successfully")
