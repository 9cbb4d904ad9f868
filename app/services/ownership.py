"""
Owner scoping for per-user resources.

Every read, update and delete of a user-owned row goes through these helpers
so the query always carries ``user_id = identity.user_id``. A row that exists
but belongs to someone else is reported exactly like a missing row.
"""

import logging
from typing import TypeVar

from sqlalchemy.orm import Query, Session

from app.core.errors import NotFoundError
from app.models.base import Base
from app.schemas.auth import RequestIdentity

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def owned(db: Session, model: type[ModelT], identity: RequestIdentity) -> Query:
    """Query over the caller's rows of ``model`` only."""
    return db.query(model).filter(model.user_id == identity.user_id)


def get_owned_or_404(
    db: Session,
    model: type[ModelT],
    pk: int,
    identity: RequestIdentity,
    label: str,
) -> ModelT:
    """Return the caller's row with primary key ``pk`` or raise NotFoundError."""
    row = owned(db, model, identity).filter(model.id == pk).first()
    if row is None:
        logger.info(
            "Owner-scoped lookup missed: model=%s id=%s user_id=%s",
            model.__name__,
            pk,
            identity.user_id,
        )
        raise NotFoundError(f"{label} not found")
    return row


def update_owned(
    db: Session,
    model: type[ModelT],
    pk: int,
    identity: RequestIdentity,
    label: str,
    values: dict[str, object],
) -> ModelT:
    """Apply ``values`` to the caller's row and commit; NotFoundError if not owned."""
    row = get_owned_or_404(db, model, pk, identity, label)
    for field, value in values.items():
        setattr(row, field, value)
    db.commit()
    db.refresh(row)
    return row


def delete_owned(
    db: Session,
    model: type[ModelT],
    pk: int,
    identity: RequestIdentity,
    label: str,
) -> None:
    """Delete the caller's row (ORM cascades apply); NotFoundError if not owned."""
    row = get_owned_or_404(db, model, pk, identity, label)
    db.delete(row)
    db.commit()
