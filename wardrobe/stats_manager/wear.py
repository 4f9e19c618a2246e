from datetime import date
from typing import Optional

from sqlalchemy import distinct, func, select

from wardrobe.model import ClothingItem, OutfitLog, outfit_items


def worn_in_range(from_date: Optional[date]):
    return [OutfitLog.date >= from_date] if from_date is not None else []


def wear_count_column(from_date: Optional[date] = None):
    """
    Correlated COUNT of distinct logs whose outfit currently contains the item.

    Membership is read at query time, so editing an outfit after it was logged
    changes the wear history of the items added or removed.
    """
    return (
        select(func.count(distinct(OutfitLog.id)))
        .select_from(OutfitLog)
        .join(outfit_items, outfit_items.c.outfit_id == OutfitLog.outfit_id)
        .where(outfit_items.c.clothing_item_id == ClothingItem.id, *worn_in_range(from_date))
        .correlate(ClothingItem)
        .scalar_subquery()
    )


def cost_per_wear(purchase_price: Optional[float], wear_count: Optional[int]) -> Optional[float]:
    """price / wears, or None when either is missing or the item was never worn."""
    if purchase_price is None or not wear_count:
        return None
    return purchase_price / wear_count
