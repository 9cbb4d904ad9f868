"""Unauthenticated liveness endpoint for load balancers."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import APP_VERSION, settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Report service status, environment and whether the database answers."""
    return HealthResponse(
        environment=settings.APP_ENV,
        version=APP_VERSION,
        database="connected" if check_db_connected(db) else "disconnected",
    )
