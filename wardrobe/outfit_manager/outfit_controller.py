import logging
from typing import Iterable, List, Optional

from sqlalchemy import delete, insert, select

from wardrobe.clothing_manager.clothing_controller import items_with_meta_query, rows_to_items
from wardrobe.database.database import Database
from wardrobe.model import Category, ClothingItem, Outfit, outfit_items, utcnow
from wardrobe.outfit_manager.queries import cover_image_column, item_count_column
from wardrobe.outfit_manager.views import OutfitWithItems, OutfitWithMeta

OUTFIT_FIELDS = frozenset({"name", "notes"})


async def _replace_members(session, outfit_id: int, item_ids: Iterable[int]):
    await session.execute(delete(outfit_items).where(outfit_items.c.outfit_id == outfit_id))
    unique_ids = list(dict.fromkeys(item_ids))
    if unique_ids:
        await session.execute(
            insert(outfit_items),
            [{"outfit_id": outfit_id, "clothing_item_id": item_id} for item_id in unique_ids],
        )


async def add_outfit(
    db: Database,
    name: Optional[str] = None,
    notes: Optional[str] = None,
    item_ids: Iterable[int] = (),
) -> int:
    """Creates an outfit together with its member items and returns its id."""
    async with db.transaction("add outfit") as session:
        outfit = Outfit(name=name, notes=notes)
        session.add(outfit)
        await session.flush()
        await _replace_members(session, outfit.id, item_ids)
        logging.debug(f"Added outfit {outfit.id}")
        return outfit.id


async def update_outfit(db: Database, outfit_id: int, item_ids: Optional[Iterable[int]] = None, **fields) -> bool:
    """
    Partial update of name/notes; when item_ids is given the membership is
    replaced as a whole in the same transaction.
    """
    unknown = set(fields) - OUTFIT_FIELDS
    if unknown:
        raise ValueError(f"Unknown outfit fields: {sorted(unknown)}")

    async with db.transaction("update outfit") as session:
        outfit = await session.get(Outfit, outfit_id)
        if outfit is None:
            return False
        for key, value in fields.items():
            setattr(outfit, key, value)
        outfit.updated_at = utcnow()
        if item_ids is not None:
            await _replace_members(session, outfit_id, item_ids)
        return True


async def get_outfit(db: Database, outfit_id: int) -> Optional[dict]:
    async with db.transaction("get outfit") as session:
        outfit = await session.get(Outfit, outfit_id)
        return outfit.to_dict() if outfit else None


async def get_outfit_item_ids(db: Database, outfit_id: int) -> List[int]:
    async with db.transaction("get outfit items") as session:
        result = await session.scalars(
            select(outfit_items.c.clothing_item_id)
            .where(outfit_items.c.outfit_id == outfit_id)
            .order_by(outfit_items.c.clothing_item_id)
        )
        return list(result)


async def get_outfit_with_items(db: Database, outfit_id: int) -> Optional[OutfitWithItems]:
    """The outfit and its member items, ordered by category then name."""
    async with db.transaction("get outfit with items") as session:
        outfit = await session.get(Outfit, outfit_id)
        if outfit is None:
            return None

        result = await session.execute(
            items_with_meta_query()
            .join(outfit_items, outfit_items.c.clothing_item_id == ClothingItem.id)
            .where(outfit_items.c.outfit_id == outfit_id)
            .order_by(Category.sort_order, ClothingItem.name)
        )
        return OutfitWithItems(**outfit.to_dict(), items=rows_to_items(result))


async def list_outfits(db: Database) -> List[OutfitWithMeta]:
    async with db.transaction("list outfits") as session:
        result = await session.execute(
            select(
                Outfit,
                item_count_column(Outfit.id).label("item_count"),
                cover_image_column(Outfit.id).label("cover_image"),
            ).order_by(Outfit.created_at.desc(), Outfit.id.desc())
        )
        return [
            OutfitWithMeta(**row.Outfit.to_dict(), item_count=row.item_count, cover_image=row.cover_image)
            for row in result
        ]


async def delete_outfit(db: Database, outfit_id: int) -> bool:
    """Removes the outfit and its memberships; items stay, logs keep a null outfit."""
    async with db.transaction("delete outfit") as session:
        result = await session.execute(delete(Outfit).where(Outfit.id == outfit_id))
        return result.rowcount > 0
