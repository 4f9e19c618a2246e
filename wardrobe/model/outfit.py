from sqlalchemy import Boolean, Column, Date, DateTime, Float, ForeignKey, Index, Integer, Table, Text, text

from wardrobe.database.base import WardrobeBase
from wardrobe.model.clothing_item import utcnow

outfit_items = Table(
    "outfit_items",
    WardrobeBase.metadata,
    Column("outfit_id", Integer, ForeignKey("outfits.id", ondelete="CASCADE"), primary_key=True),
    Column("clothing_item_id", Integer, ForeignKey("clothing_items.id", ondelete="CASCADE"), primary_key=True),
)


class Outfit(WardrobeBase):
    __tablename__ = "outfits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class OutfitLog(WardrobeBase):
    __tablename__ = "outfit_logs"
    __table_args__ = (
        # At most one outfit of the day per calendar date.
        Index("one_ootd_per_day", "date", unique=True, sqlite_where=text("is_ootd = 1")),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Log history outlives the outfit: deleting it only nulls the reference.
    outfit_id = Column(Integer, ForeignKey("outfits.id", ondelete="SET NULL"), nullable=True)
    date = Column(Date, nullable=False)
    is_ootd = Column(Boolean, nullable=False, default=False)
    notes = Column(Text, nullable=True)
    temperature_low = Column(Float, nullable=True)
    temperature_high = Column(Float, nullable=True)
    weather_condition = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
