"""Schemas for report notification settings."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

ReportFrequency = Literal["daily", "weekly", "monthly"]


class ReportSettingsRequest(BaseModel):
    enabled: bool
    frequency: ReportFrequency = "weekly"
    email: EmailStr | None = Field(default=None, description="Where reports are sent")


class ReportSettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    enabled: bool = False
    frequency: ReportFrequency = "weekly"
    email: str | None = None
