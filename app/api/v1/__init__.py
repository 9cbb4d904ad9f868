"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import admin, auth, categories, expenses, health, items, report_settings

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
router.include_router(items.router, prefix="/items", tags=["items"])
router.include_router(
    report_settings.router, prefix="/report-settings", tags=["report-settings"]
)
router.include_router(admin.router, prefix="/all-expenses", tags=["admin"])
