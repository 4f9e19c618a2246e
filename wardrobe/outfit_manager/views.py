from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from wardrobe.clothing_manager.views import ClothingItemWithMeta


@dataclass
class OutfitWithMeta:
    id: int
    name: Optional[str]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime
    item_count: int = 0
    cover_image: Optional[str] = None  # image of any member item that has one


@dataclass
class OutfitWithItems:
    id: int
    name: Optional[str]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime
    items: List[ClothingItemWithMeta] = field(default_factory=list)


@dataclass
class OutfitLogWithMeta:
    id: int
    outfit_id: Optional[int]
    date: date
    is_ootd: bool
    notes: Optional[str]
    temperature_low: Optional[float]
    temperature_high: Optional[float]
    weather_condition: Optional[str]
    created_at: datetime
    outfit_name: Optional[str] = None
    item_count: int = 0
    cover_image: Optional[str] = None
