import asyncio
import calendar
import re
from datetime import date
from typing import List, Optional

from sqlalchemy import case, distinct, func, select

from wardrobe.constants import NO_BRAND_LABEL, STATS_TOP_N
from wardrobe.database.database import Database
from wardrobe.dates import DateLike, to_date
from wardrobe.model import (
    Category,
    ClothingItem,
    Color,
    ItemStatus,
    Material,
    Occasion,
    OutfitLog,
    Season,
    clothing_item_colors,
    clothing_item_materials,
    clothing_item_occasions,
    clothing_item_seasons,
)
from wardrobe.stats_manager.views import (
    BreakdownRow,
    CalendarDay,
    ColorBreakdownRow,
    StatItem,
    StatsData,
    StatsOverview,
)
from wardrobe.stats_manager.wear import cost_per_wear, wear_count_column

YEAR_MONTH = re.compile(r"(\d{4})-(0[1-9]|1[0-2])")


def _is_active():
    return ClothingItem.status == ItemStatus.Active


async def get_wear_count(db: Database, item_id: int, from_date: DateLike = None) -> Optional[int]:
    """Number of logs whose outfit currently contains the item, or None for an unknown item."""
    async with db.transaction("wear count") as session:
        result = await session.execute(
            select(wear_count_column(to_date(from_date))).where(ClothingItem.id == item_id)
        )
        return result.scalar_one_or_none()


async def get_cost_per_wear(db: Database, item_id: int) -> Optional[float]:
    async with db.transaction("cost per wear") as session:
        row = (await session.execute(
            select(ClothingItem.purchase_price, wear_count_column().label("wear_count"))
            .where(ClothingItem.id == item_id)
        )).first()
    if row is None:
        return None
    return cost_per_wear(row.purchase_price, row.wear_count)


async def get_calendar_days_for_month(db: Database, year_month: str) -> List[CalendarDay]:
    """
    Per-day log summary for a month given as 'YYYY-MM'.

    Only dates that have at least one log are returned, in ascending order.

    :raises ValueError: year_month is not 'YYYY-MM'
    """
    match = YEAR_MONTH.fullmatch(year_month or "")
    if not match:
        raise ValueError(f"Expected a 'YYYY-MM' month, got {year_month!r}")
    year, month = int(match.group(1)), int(match.group(2))
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])

    async with db.transaction("calendar days") as session:
        result = await session.execute(
            select(
                OutfitLog.date,
                func.count(OutfitLog.id).label("log_count"),
                func.max(case((OutfitLog.is_ootd.is_(True), 1), else_=0)).label("has_ootd"),
            )
            .where(OutfitLog.date.between(first, last))
            .group_by(OutfitLog.date)
            .order_by(OutfitLog.date)
        )
        return [CalendarDay(date=row.date, log_count=row.log_count, has_ootd=bool(row.has_ootd)) for row in result]


async def get_stats_overview(db: Database, from_date: DateLike = None) -> StatsOverview:
    """
    Headline numbers for the active closet.

    Wear counts respect from_date; total_value is the whole active inventory.
    """
    wear_count = wear_count_column(to_date(from_date))
    async with db.transaction("stats overview") as session:
        row = (await session.execute(
            select(
                func.count(ClothingItem.id).label("total_items"),
                func.count(case((wear_count > 0, 1))).label("worn_items"),
                func.count(case((wear_count == 0, 1))).label("never_worn_items"),
                func.sum(ClothingItem.purchase_price).label("total_value"),
            ).where(_is_active())
        )).one()
    return StatsOverview(
        total_items=row.total_items,
        worn_items=row.worn_items,
        never_worn_items=row.never_worn_items,
        total_value=row.total_value,
    )


async def _ranked_items(db: Database, label: str, from_date, limit: int, *, worn: bool, descending: bool):
    wear_count = wear_count_column(to_date(from_date)).label("wear_count")
    query = select(ClothingItem.id, ClothingItem.name, ClothingItem.image_path, wear_count).where(_is_active())
    if worn:
        query = query.where(wear_count > 0)
        order = wear_count.desc() if descending else wear_count.asc()
        query = query.order_by(order, ClothingItem.name, ClothingItem.id)
    else:
        query = query.where(wear_count == 0).order_by(ClothingItem.name, ClothingItem.id)

    async with db.transaction(label) as session:
        result = await session.execute(query.limit(limit))
        return [StatItem(id=row.id, name=row.name, image_path=row.image_path, wear_count=row.wear_count) for row in result]


async def get_most_worn_items(db: Database, from_date: DateLike = None, limit: int = STATS_TOP_N) -> List[StatItem]:
    return await _ranked_items(db, "most worn items", from_date, limit, worn=True, descending=True)


async def get_least_worn_items(db: Database, from_date: DateLike = None, limit: int = STATS_TOP_N) -> List[StatItem]:
    """Least worn active items; never-worn items are left out."""
    return await _ranked_items(db, "least worn items", from_date, limit, worn=True, descending=False)


async def get_never_worn_items(db: Database, from_date: DateLike = None, limit: int = STATS_TOP_N) -> List[StatItem]:
    return await _ranked_items(db, "never worn items", from_date, limit, worn=False, descending=False)


async def _tag_breakdown(db: Database, label: str, tag_model, junction, tag_column: str, order_by) -> List[BreakdownRow]:
    async with db.transaction(label) as session:
        result = await session.execute(
            select(tag_model.name, func.count(distinct(ClothingItem.id)).label("item_count"))
            .select_from(ClothingItem)
            .join(junction, junction.c.clothing_item_id == ClothingItem.id)
            .join(tag_model, tag_model.id == junction.c[tag_column])
            .where(_is_active())
            .group_by(tag_model.id)
            .order_by(order_by)
        )
        return [BreakdownRow(label=row.name, count=row.item_count) for row in result]


async def get_breakdown_by_category(db: Database) -> List[BreakdownRow]:
    """Active items per category, in category display order."""
    async with db.transaction("breakdown by category") as session:
        result = await session.execute(
            select(Category.name, func.count(ClothingItem.id).label("item_count"))
            .select_from(Category)
            .join(ClothingItem, ClothingItem.category_id == Category.id)
            .where(_is_active())
            .group_by(Category.id)
            .order_by(Category.sort_order, Category.id)
        )
        return [BreakdownRow(label=row.name, count=row.item_count) for row in result]


async def get_breakdown_by_color(db: Database) -> List[ColorBreakdownRow]:
    async with db.transaction("breakdown by color") as session:
        result = await session.execute(
            select(Color.name, Color.hex, func.count(distinct(ClothingItem.id)).label("item_count"))
            .select_from(ClothingItem)
            .join(clothing_item_colors, clothing_item_colors.c.clothing_item_id == ClothingItem.id)
            .join(Color, Color.id == clothing_item_colors.c.color_id)
            .where(_is_active())
            .group_by(Color.id)
            .order_by(Color.name)
        )
        return [ColorBreakdownRow(label=row.name, hex=row.hex, count=row.item_count) for row in result]


async def get_breakdown_by_brand(db: Database) -> List[BreakdownRow]:
    """Active items per brand; items without a brand are counted under NO_BRAND_LABEL."""
    brand = func.coalesce(func.nullif(func.trim(ClothingItem.brand), ""), NO_BRAND_LABEL).label("brand_label")
    async with db.transaction("breakdown by brand") as session:
        result = await session.execute(
            select(brand, func.count(ClothingItem.id).label("item_count"))
            .where(_is_active())
            .group_by(brand)
            .order_by(brand)
        )
        return [BreakdownRow(label=row.brand_label, count=row.item_count) for row in result]


async def get_breakdown_by_material(db: Database) -> List[BreakdownRow]:
    return await _tag_breakdown(
        db, "breakdown by material", Material, clothing_item_materials, "material_id", Material.name
    )


async def get_breakdown_by_occasion(db: Database) -> List[BreakdownRow]:
    return await _tag_breakdown(
        db, "breakdown by occasion", Occasion, clothing_item_occasions, "occasion_id", Occasion.id
    )


async def get_breakdown_by_season(db: Database) -> List[BreakdownRow]:
    return await _tag_breakdown(
        db, "breakdown by season", Season, clothing_item_seasons, "season_id", Season.id
    )


async def get_stats(db: Database, from_date: DateLike = None) -> StatsData:
    """
    Everything the statistics screen shows.

    Wear based figures respect from_date; breakdowns always describe the whole
    active closet.
    """
    (
        overview,
        most_worn,
        least_worn,
        never_worn,
        by_category,
        by_color,
        by_brand,
        by_material,
        by_occasion,
        by_season,
    ) = await asyncio.gather(
        get_stats_overview(db, from_date),
        get_most_worn_items(db, from_date),
        get_least_worn_items(db, from_date),
        get_never_worn_items(db, from_date),
        get_breakdown_by_category(db),
        get_breakdown_by_color(db),
        get_breakdown_by_brand(db),
        get_breakdown_by_material(db),
        get_breakdown_by_occasion(db),
        get_breakdown_by_season(db),
    )
    return StatsData(
        overview=overview,
        most_worn=most_worn,
        least_worn=least_worn,
        never_worn=never_worn,
        by_category=by_category,
        by_color=by_color,
        by_brand=by_brand,
        by_material=by_material,
        by_occasion=by_occasion,
        by_season=by_season,
    )
