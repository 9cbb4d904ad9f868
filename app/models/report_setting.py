"""ORM model for per-user expense report notification preferences."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, false

from app.models.base import Base


class ReportSetting(Base):
    """
    Report notification preference. At most one row per user (unique user_id);
    writes go through an upsert.
    """

    __tablename__ = "report_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    enabled = Column(Boolean, nullable=False, default=False, server_default=false())
    frequency = Column(String(16), nullable=False, default="weekly", server_default="weekly")
    email = Column(String(255), nullable=True)
