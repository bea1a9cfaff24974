"""Catalog store package.

Provides:
- CatalogStore: engine/session lifecycle with explicit init() and close()
- CatalogSession: per-entity repositories sharing one transaction
"""

from curriculum_ops.store.catalog import CatalogSession, CatalogStore

__all__ = ["CatalogSession", "CatalogStore"]
