"""SQLAlchemy declarative Base shared by every model."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    # Models use plain ``Column`` attributes with non-``Mapped`` annotations
    __allow_unmapped__ = True
