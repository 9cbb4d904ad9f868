"""Report notification settings: one row per user, written by upsert."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.v1.deps import CurrentIdentity
from app.core.database import get_db
from app.models import ReportSetting
from app.schemas.auth import RequestIdentity
from app.schemas.report_settings import ReportSettingsRequest, ReportSettingsResponse
from app.services.ownership import owned

logger = logging.getLogger(__name__)
router = APIRouter()


def _apply(row: ReportSetting, body: ReportSettingsRequest) -> None:
    row.enabled = body.enabled
    row.frequency = body.frequency
    row.email = str(body.email) if body.email else None


def upsert_report_settings(
    db: Session, identity: RequestIdentity, body: ReportSettingsRequest
) -> ReportSetting:
    """Insert or overwrite the caller's settings row; the latest call wins."""
    row = owned(db, ReportSetting, identity).first()
    if row is None:
        row = ReportSetting(user_id=identity.user_id)
        _apply(row, body)
        db.add(row)
        try:
            db.commit()
        except IntegrityError:
            # Another request inserted the row first (unique user_id); overwrite it.
            db.rollback()
            row = owned(db, ReportSetting, identity).one()
            _apply(row, body)
            db.commit()
    else:
        _apply(row, body)
        db.commit()
    db.refresh(row)
    return row


@router.get("", response_model=ReportSettingsResponse)
def get_report_settings(
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> ReportSettingsResponse:
    """Return the caller's settings, or the defaults if none were saved."""
    row = owned(db, ReportSetting, identity).first()
    if row is None:
        return ReportSettingsResponse()
    return ReportSettingsResponse.model_validate(row)


@router.post("", response_model=ReportSettingsResponse)
def save_report_settings(
    body: ReportSettingsRequest,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
) -> ReportSettingsResponse:
    row = upsert_report_settings(db, identity, body)
    logger.info(
        "Report settings saved: user_id=%s enabled=%s frequency=%s",
        identity.user_id,
        row.enabled,
        row.frequency,
    )
    return ReportSettingsResponse.model_validate(row)
