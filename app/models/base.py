"""SQLAlchemy declarative Base shared by every table, pivots included."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
