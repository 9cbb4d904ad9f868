"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.category import Category
from app.models.expense import Expense
from app.models.grocery_item import GroceryItem
from app.models.report_setting import ReportSetting
from app.models.user import User

__all__ = ["Base", "Category", "Expense", "GroceryItem", "ReportSetting", "User"]
