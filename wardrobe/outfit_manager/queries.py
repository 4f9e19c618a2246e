from sqlalchemy import func, select

from wardrobe.model import ClothingItem, outfit_items


def item_count_column(outfit_id_column):
    return (
        select(func.count())
        .select_from(outfit_items)
        .where(outfit_items.c.outfit_id == outfit_id_column)
        .scalar_subquery()
    )


def cover_image_column(outfit_id_column):
    return (
        select(ClothingItem.image_path)
        .join(outfit_items, outfit_items.c.clothing_item_id == ClothingItem.id)
        .where(outfit_items.c.outfit_id == outfit_id_column, ClothingItem.image_path.isnot(None))
        .limit(1)
        .scalar_subquery()
    )
