"""Error taxonomy of the wardrobe data layer.

Absent rows are reported as ``None``/``False`` by the controllers and never
raise. Everything here is a genuine failure.
"""
from typing import List, Optional


class WardrobeError(Exception):
    """Base class for every error raised by the data layer."""


class ConstraintViolationError(WardrobeError):
    """A write broke a NOT NULL, CHECK, UNIQUE or FOREIGN KEY rule."""


class ReferenceMismatchError(ConstraintViolationError):
    """A subcategory was paired with a category it does not belong to."""

    def __init__(self, subcategory_id: int, category_id: Optional[int]):
        self.subcategory_id = subcategory_id
        self.category_id = category_id
        super().__init__(
            f"Subcategory {subcategory_id} does not belong to category {category_id}"
        )


class StorageError(WardrobeError):
    """The storage engine failed (I/O, corruption, locked file)."""


class MigrationError(WardrobeError):
    """A schema migration failed; the store is not usable."""


class SeedError(WardrobeError):
    """One or more reference data seed steps failed."""

    def __init__(self, failed_steps: List[str]):
        self.failed_steps = failed_steps
        super().__init__(f"Seeding failed for: {', '.join(failed_steps)}")
