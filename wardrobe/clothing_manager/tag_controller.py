from typing import Iterable, List

from sqlalchemy import delete, insert, select, update

from wardrobe.database.database import Database
from wardrobe.model import TAG_JUNCTIONS, ClothingItem, TagKind, utcnow


def _junction(kind):
    try:
        return TagKind(kind), *TAG_JUNCTIONS[TagKind(kind)]
    except ValueError:
        raise ValueError(f"Unknown tag kind: {kind}") from None


async def set_item_tags(db: Database, item_id: int, kind, tag_ids: Iterable[int]) -> None:
    """
    Replaces the whole tag set of one kind for an item.

    Delete and re-insert run in a single transaction, so readers never see
    the item without tags. Calling it twice with the same ids is a no-op.
    """
    kind, table, tag_column = _junction(kind)
    unique_ids = list(dict.fromkeys(tag_ids))

    async with db.transaction(f"set {kind.value} tags") as session:
        await session.execute(delete(table).where(table.c.clothing_item_id == item_id))
        if unique_ids:
            await session.execute(
                insert(table),
                [{"clothing_item_id": item_id, tag_column: tag_id} for tag_id in unique_ids],
            )
        await session.execute(
            update(ClothingItem).where(ClothingItem.id == item_id).values(updated_at=utcnow())
        )


async def get_item_tag_ids(db: Database, item_id: int, kind) -> List[int]:
    kind, table, tag_column = _junction(kind)
    async with db.transaction(f"get {kind.value} tags") as session:
        result = await session.scalars(
            select(table.c[tag_column]).where(table.c.clothing_item_id == item_id).order_by(table.c[tag_column])
        )
        return list(result)


async def get_item_ids_by_tag(db: Database, kind, tag_id: int) -> List[int]:
    """Ids of the items carrying the given tag; used to resolve closet filters."""
    kind, table, tag_column = _junction(kind)
    async with db.transaction(f"items by {kind.value}") as session:
        result = await session.scalars(
            select(table.c.clothing_item_id).where(table.c[tag_column] == tag_id)
        )
        return list(result)
