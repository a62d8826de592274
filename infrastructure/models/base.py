"""SQLAlchemy declarative base for all ORM models.

This module provides a shared declarative base that all ORM models inherit from.
Having a centralized base ensures metadata consistency across all models, which
is also what the Alembic environment compares migrations against.

Usage:
    >>> from infrastructure.models.base import Base
    >>>
    >>> class MyModel(Base):
    ...     __tablename__ = 'my_table'
    ...     # ... column definitions
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base

# Shared declarative base for all ORM models in the infrastructure layer
Base = declarative_base()


class TimestampedMixin:
    """Columns shared by every table: integer primary key and timestamps."""

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        index=True,
        comment="Primary key, autoincrement integer",
    )

    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
        comment="Timestamp when the row was created",
    )

    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
        comment="Timestamp when the row was last updated",
    )
