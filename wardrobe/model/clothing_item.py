from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Boolean, Column, Date, DateTime, Float, ForeignKey, Integer, Table, Text
from sqlalchemy import Enum as SqlEnum

from wardrobe.database.base import WardrobeBase
from wardrobe.exceptions import ConstraintViolationError


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ItemStatus(str, Enum):
    Active = "Active"
    Sold = "Sold"
    Donated = "Donated"
    Lost = "Lost"


class WashStatus(str, Enum):
    Clean = "Clean"
    Dirty = "Dirty"


class TagKind(str, Enum):
    color = "color"
    material = "material"
    season = "season"
    occasion = "occasion"
    pattern = "pattern"


class ClothingItem(WardrobeBase):
    __tablename__ = "clothing_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    brand = Column(Text, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id", ondelete="SET NULL"), nullable=True)
    size_value_id = Column(Integer, ForeignKey("size_values.id", ondelete="SET NULL"), nullable=True)
    waist = Column(Float, nullable=True)  # half sizes, e.g. 32.5
    inseam = Column(Float, nullable=True)
    purchase_price = Column(Float, nullable=True)
    purchase_date = Column(Date, nullable=True)
    purchase_location = Column(Text, nullable=True)
    image_path = Column(Text, nullable=True)  # relative path only
    notes = Column(Text, nullable=True)
    status = Column(SqlEnum(ItemStatus, native_enum=False, create_constraint=False), nullable=False, default=ItemStatus.Active)
    wash_status = Column(SqlEnum(WashStatus, native_enum=False, create_constraint=False), nullable=False, default=WashStatus.Clean)
    is_favorite = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __init__(self, **kwargs):
        kwargs.setdefault("status", ItemStatus.Active)
        kwargs.setdefault("wash_status", WashStatus.Clean)
        kwargs.setdefault("is_favorite", False)
        super().__init__(**kwargs)

        if not self.name:
            raise ConstraintViolationError("Clothing item name is required")

        if self.status not in ItemStatus.__members__:
            raise ConstraintViolationError(f"Invalid status value: {self.status}")

        if self.wash_status not in WashStatus.__members__:
            raise ConstraintViolationError(f"Invalid wash status value: {self.wash_status}")


def _item_junction(name: str, tag_column: str, tag_table: str) -> Table:
    return Table(
        name,
        WardrobeBase.metadata,
        Column("clothing_item_id", Integer, ForeignKey("clothing_items.id", ondelete="CASCADE"), primary_key=True),
        Column(tag_column, Integer, ForeignKey(f"{tag_table}.id", ondelete="CASCADE"), primary_key=True),
    )


clothing_item_colors = _item_junction("clothing_item_colors", "color_id", "colors")
clothing_item_materials = _item_junction("clothing_item_materials", "material_id", "materials")
clothing_item_seasons = _item_junction("clothing_item_seasons", "season_id", "seasons")
clothing_item_occasions = _item_junction("clothing_item_occasions", "occasion_id", "occasions")
clothing_item_patterns = _item_junction("clothing_item_patterns", "pattern_id", "patterns")

# kind -> (junction table, tag id column name)
TAG_JUNCTIONS = {
    TagKind.color: (clothing_item_colors, "color_id"),
    TagKind.material: (clothing_item_materials, "material_id"),
    TagKind.season: (clothing_item_seasons, "season_id"),
    TagKind.occasion: (clothing_item_occasions, "occasion_id"),
    TagKind.pattern: (clothing_item_patterns, "pattern_id"),
}
