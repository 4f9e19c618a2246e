from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from wardrobe.model import ClothingItem
from wardrobe.stats_manager.wear import cost_per_wear


@dataclass
class ClothingItemWithMeta:
    """A clothing item row plus its lookup names and computed wear count."""

    id: int
    name: str
    brand: Optional[str]
    category_id: Optional[int]
    subcategory_id: Optional[int]
    size_value_id: Optional[int]
    waist: Optional[float]
    inseam: Optional[float]
    purchase_price: Optional[float]
    purchase_date: Optional[date]
    purchase_location: Optional[str]
    image_path: Optional[str]
    notes: Optional[str]
    status: str
    wash_status: str
    is_favorite: bool
    created_at: datetime
    updated_at: datetime
    category_name: Optional[str] = None
    subcategory_name: Optional[str] = None
    wear_count: int = 0

    @property
    def cost_per_wear(self) -> Optional[float]:
        return cost_per_wear(self.purchase_price, self.wear_count)

    @classmethod
    def from_row(cls, item: ClothingItem, category_name, subcategory_name, wear_count) -> "ClothingItemWithMeta":
        return cls(
            **item.to_dict(),
            category_name=category_name,
            subcategory_name=subcategory_name,
            wear_count=wear_count or 0,
        )
