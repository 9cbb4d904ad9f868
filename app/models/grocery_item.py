"""ORM model for grocery list entries."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String

from app.models.base import Base


class GroceryItem(Base):
    __tablename__ = "grocery_list"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    item_name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
