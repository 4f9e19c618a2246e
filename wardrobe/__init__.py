"""Local wardrobe data layer: schema, reference data, entity store and analytics."""

from wardrobe.database.database import Database

__all__ = ["Database"]
