"""ORM model for expense categories."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class Category(Base):
    """A user-owned expense category. Deleting it deletes its expenses."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)

    expenses = relationship(
        "Expense", back_populates="category", cascade="all, delete-orphan"
    )
