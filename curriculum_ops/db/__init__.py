"""Database package: declarative base, ORM models and catalog seed."""

from curriculum_ops.db.base import Base, new_id

__all__ = ["Base", "new_id"]
