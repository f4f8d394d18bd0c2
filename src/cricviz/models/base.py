"""Declarative base shared by cricviz tables."""

from typing import Any, Iterable

from sqlalchemy import Column, Integer, DateTime, func
from sqlalchemy.orm import declarative_base


class TimestampedRecord:
    """Surrogate key plus created/updated timestamps for every table."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def to_dict(self, exclude: Iterable[str] = ()) -> dict[str, Any]:
        """Column values keyed by column name, minus ``exclude``."""
        skipped = set(exclude)
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
            if column.name not in skipped
        }


Base = declarative_base(cls=TimestampedRecord)
