import logging
from typing import List, Optional

from sqlalchemy import delete, select

from wardrobe.clothing_manager.views import ClothingItemWithMeta
from wardrobe.database.database import Database
from wardrobe.dates import to_date
from wardrobe.exceptions import ConstraintViolationError, ReferenceMismatchError
from wardrobe.model import Category, ClothingItem, ItemStatus, Subcategory, WashStatus, utcnow
from wardrobe.stats_manager.wear import wear_count_column

ITEM_FIELDS = frozenset({
    "name",
    "brand",
    "category_id",
    "subcategory_id",
    "size_value_id",
    "waist",
    "inseam",
    "purchase_price",
    "purchase_date",
    "purchase_location",
    "image_path",
    "notes",
    "status",
    "wash_status",
    "is_favorite",
})


def _clean_fields(fields: dict) -> dict:
    unknown = set(fields) - ITEM_FIELDS
    if unknown:
        raise ValueError(f"Unknown clothing item fields: {sorted(unknown)}")
    for key, allowed in (("status", ItemStatus), ("wash_status", WashStatus)):
        if key in fields and (not isinstance(fields[key], str) or fields[key] not in allowed.__members__):
            raise ConstraintViolationError(f"Invalid {key} value: {fields[key]!r}")
    if "purchase_date" in fields:
        fields["purchase_date"] = to_date(fields["purchase_date"])
    return fields


async def _check_subcategory(session, category_id: Optional[int], subcategory_id: Optional[int]):
    """The chosen subcategory must belong to the chosen category."""
    if subcategory_id is None:
        return
    parent_id = await session.scalar(select(Subcategory.category_id).where(Subcategory.id == subcategory_id))
    if parent_id is None:
        # unknown subcategory: left to the foreign key
        return
    if parent_id != category_id:
        raise ReferenceMismatchError(subcategory_id, category_id)


def items_with_meta_query():
    return (
        select(
            ClothingItem,
            Category.name.label("category_name"),
            Subcategory.name.label("subcategory_name"),
            wear_count_column().label("wear_count"),
        )
        .select_from(ClothingItem)
        .outerjoin(Category, ClothingItem.category_id == Category.id)
        .outerjoin(Subcategory, ClothingItem.subcategory_id == Subcategory.id)
    )


def rows_to_items(rows) -> List[ClothingItemWithMeta]:
    return [
        ClothingItemWithMeta.from_row(row.ClothingItem, row.category_name, row.subcategory_name, row.wear_count)
        for row in rows
    ]


async def list_clothing_items(db: Database) -> List[ClothingItemWithMeta]:
    """All clothing items, newest first, with category names and wear counts."""
    async with db.transaction("list clothing items") as session:
        result = await session.execute(
            items_with_meta_query().order_by(ClothingItem.created_at.desc(), ClothingItem.id.desc())
        )
        return rows_to_items(result)


async def get_clothing_item(db: Database, item_id: int) -> Optional[ClothingItemWithMeta]:
    async with db.transaction("get clothing item") as session:
        result = await session.execute(items_with_meta_query().where(ClothingItem.id == item_id))
        items = rows_to_items(result)
        return items[0] if items else None


async def add_clothing_item(db: Database, name: str, **fields) -> int:
    """
    Inserts a clothing item and returns its id.

    :param name: required display name
    :param fields: any other column from ITEM_FIELDS; omitted ones take the schema defaults
    :raises ConstraintViolationError: missing name, invalid status, unknown foreign key
    """
    fields = _clean_fields(fields)
    async with db.transaction("add clothing item") as session:
        await _check_subcategory(session, fields.get("category_id"), fields.get("subcategory_id"))
        item = ClothingItem(name=name, **fields)
        session.add(item)
        await session.flush()
        logging.debug(f"Added clothing item {item.id}: {item.name}")
        return item.id


async def update_clothing_item(db: Database, item_id: int, **fields) -> bool:
    """
    Applies only the given fields; everything else keeps its value.

    Passing None explicitly clears a nullable column. Returns False when the
    item does not exist.
    """
    fields = _clean_fields(fields)
    async with db.transaction("update clothing item") as session:
        item = await session.get(ClothingItem, item_id)
        if item is None:
            return False

        if "category_id" in fields or "subcategory_id" in fields:
            await _check_subcategory(
                session,
                fields.get("category_id", item.category_id),
                fields.get("subcategory_id", item.subcategory_id),
            )

        for key, value in fields.items():
            setattr(item, key, value)
        item.updated_at = utcnow()
        return True


async def set_favorite(db: Database, item_id: int, is_favorite: bool = True) -> bool:
    return await update_clothing_item(db, item_id, is_favorite=is_favorite)


async def set_wash_status(db: Database, item_id: int, wash_status: str) -> bool:
    return await update_clothing_item(db, item_id, wash_status=wash_status)


async def delete_clothing_item(db: Database, item_id: int) -> bool:
    """Deletes the item; its tag links and outfit memberships cascade."""
    async with db.transaction("delete clothing item") as session:
        result = await session.execute(delete(ClothingItem).where(ClothingItem.id == item_id))
        deleted = result.rowcount > 0
    if deleted:
        logging.info(f"Deleted clothing item {item_id}")
    return deleted


async def get_distinct_brands(db: Database) -> List[str]:
    async with db.transaction("distinct brands") as session:
        result = await session.scalars(
            select(ClothingItem.brand)
            .where(ClothingItem.brand.isnot(None), ClothingItem.brand != "")
            .distinct()
            .order_by(ClothingItem.brand)
        )
        return list(result)
