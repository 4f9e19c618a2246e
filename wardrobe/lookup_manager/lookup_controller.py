from typing import List

from sqlalchemy import select

from wardrobe.database.database import Database
from wardrobe.model import Category, Color, Material, Occasion, Pattern, Season, SizeSystem, SizeValue, Subcategory


async def _all(db: Database, label: str, query) -> List[dict]:
    async with db.transaction(label) as session:
        result = await session.scalars(query)
        return [row.to_dict() for row in result]


async def get_categories(db: Database) -> List[dict]:
    return await _all(db, "categories", select(Category).order_by(Category.sort_order, Category.id))


async def get_subcategories(db: Database, category_id: int) -> List[dict]:
    return await _all(
        db,
        "subcategories",
        select(Subcategory)
        .where(Subcategory.category_id == category_id)
        .order_by(Subcategory.sort_order, Subcategory.id),
    )


async def get_seasons(db: Database) -> List[dict]:
    return await _all(db, "seasons", select(Season).order_by(Season.id))


async def get_occasions(db: Database) -> List[dict]:
    return await _all(db, "occasions", select(Occasion).order_by(Occasion.id))


async def get_colors(db: Database) -> List[dict]:
    return await _all(db, "colors", select(Color).order_by(Color.name))


async def get_materials(db: Database) -> List[dict]:
    return await _all(db, "materials", select(Material).order_by(Material.name))


async def get_patterns(db: Database) -> List[dict]:
    return await _all(db, "patterns", select(Pattern).order_by(Pattern.name))


async def get_size_systems(db: Database) -> List[dict]:
    return await _all(db, "size systems", select(SizeSystem).order_by(SizeSystem.id))


async def get_size_values(db: Database, size_system_id: int) -> List[dict]:
    """Values of one size system, smallest first."""
    return await _all(
        db,
        "size values",
        select(SizeValue)
        .where(SizeValue.size_system_id == size_system_id)
        .order_by(SizeValue.sort_order, SizeValue.id),
    )
