"""SQLAlchemy declarative Base with a constraint naming convention shared with migrations."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Upper bounds of the Integer and Numeric(10, 2) columns, checked at the request boundary.
MAX_INTEGER = 2**31 - 1
PRICE_LIMIT = 10**8


class Base(DeclarativeBase):
    """Declarative base for all ORM models; every owned model adds a user_id column."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
