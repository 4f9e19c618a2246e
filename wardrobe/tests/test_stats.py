from datetime import date

import pytest

from wardrobe.clothing_manager import add_clothing_item, get_clothing_item, set_item_tags
from wardrobe.lookup_manager import get_categories
from wardrobe.outfit_manager import add_outfit, add_outfit_log, update_outfit
from wardrobe.stats_manager import (
    cost_per_wear,
    get_breakdown_by_brand,
    get_breakdown_by_category,
    get_breakdown_by_color,
    get_breakdown_by_season,
    get_calendar_days_for_month,
    get_cost_per_wear,
    get_least_worn_items,
    get_most_worn_items,
    get_never_worn_items,
    get_stats,
    get_stats_overview,
    get_wear_count,
)


@pytest.mark.parametrize(
    "price, wears, expected",
    [
        (50.0, 0, None),
        (50.0, 5, 10.0),
        (None, 5, None),
        (None, 0, None),
    ],
)
def test_cost_per_wear(price, wears, expected):
    assert cost_per_wear(price, wears) == expected


async def _wear(db, item_ids, *dates, name="Outfit"):
    outfit_id = await add_outfit(db, name, item_ids=item_ids)
    for log_date in dates:
        await add_outfit_log(db, log_date, outfit_id=outfit_id)
    return outfit_id


async def test_wear_count_counts_distinct_logs(db):
    shirt = await add_clothing_item(db, "Shirt", purchase_price=30.0)
    jeans = await add_clothing_item(db, "Jeans")
    await _wear(db, [shirt, jeans], "2025-01-01", "2025-01-02")
    await _wear(db, [shirt], "2025-02-01")

    assert await get_wear_count(db, shirt) == 3
    assert await get_wear_count(db, jeans) == 2
    assert await get_wear_count(db, shirt, from_date="2025-01-15") == 1
    assert await get_wear_count(db, 9999) is None
    assert await get_cost_per_wear(db, shirt) == 10.0
    assert await get_cost_per_wear(db, jeans) is None


async def test_wear_count_follows_current_outfit_membership(db):
    # Logs point at the outfit, not a frozen list of items, so editing the
    # outfit afterwards rewrites the wear history of the items involved.
    kept = await add_clothing_item(db, "Kept")
    swapped_out = await add_clothing_item(db, "Swapped out")
    swapped_in = await add_clothing_item(db, "Swapped in")
    outfit_id = await _wear(db, [kept, swapped_out], "2025-01-01")

    await update_outfit(db, outfit_id, item_ids=[kept, swapped_in])

    assert await get_wear_count(db, kept) == 1
    assert await get_wear_count(db, swapped_out) == 0
    assert await get_wear_count(db, swapped_in) == 1


async def test_overview(db):
    worn = await add_clothing_item(db, "Worn", purchase_price=40.0)
    await add_clothing_item(db, "Unworn", purchase_price=10.0)
    await add_clothing_item(db, "Sold one", purchase_price=99.0, status="Sold")
    await _wear(db, [worn], "2024-06-01")

    overview = await get_stats_overview(db)
    assert overview.total_items == 2
    assert overview.worn_items == 1
    assert overview.never_worn_items == 1
    assert overview.total_value == 50.0

    recent = await get_stats_overview(db, from_date=date(2025, 1, 1))
    assert recent.worn_items == 0
    assert recent.never_worn_items == 2
    assert recent.total_value == 50.0


async def test_overview_of_empty_closet(db):
    overview = await get_stats_overview(db)
    assert overview.total_items == 0
    assert overview.total_value is None


async def test_most_least_and_never_worn(db):
    often = await add_clothing_item(db, "Often")
    once = await add_clothing_item(db, "Once")
    never = await add_clothing_item(db, "Never")
    archived = await add_clothing_item(db, "Archived", status="Donated")
    await _wear(db, [often, archived], "2025-01-01", "2025-01-02", "2025-01-03")
    await _wear(db, [once], "2025-01-04")

    most = await get_most_worn_items(db)
    assert [(i.id, i.wear_count) for i in most] == [(often, 3), (once, 1)]

    least = await get_least_worn_items(db)
    assert [i.id for i in least] == [once, often]

    never_worn = await get_never_worn_items(db)
    assert [i.id for i in never_worn] == [never]
    assert never_worn[0].wear_count == 0

    assert len(await get_most_worn_items(db, limit=1)) == 1
    assert [i.id for i in await get_most_worn_items(db, from_date="2025-01-04")] == [once]


async def test_top_n_cap(db):
    for n in range(20):
        await add_clothing_item(db, f"Item {n:02d}")
    assert len(await get_never_worn_items(db)) == 15


async def test_breakdowns(db, lookup_ids):
    categories = await get_categories(db)
    tops, bottoms = categories[0]["id"], categories[1]["id"]
    red, blue = lookup_ids["color"]["Red"], lookup_ids["color"]["Blue"]

    a = await add_clothing_item(db, "A", category_id=tops, brand="Uniqlo")
    b = await add_clothing_item(db, "B", category_id=tops, brand="")
    c = await add_clothing_item(db, "C", category_id=bottoms)
    d = await add_clothing_item(db, "D", category_id=bottoms, status="Lost", brand="Gap")
    await set_item_tags(db, a, "color", [red, blue])
    await set_item_tags(db, b, "color", [red])
    await set_item_tags(db, d, "color", [blue])
    await set_item_tags(db, c, "season", [lookup_ids["season"]["Winter"]])

    by_category = await get_breakdown_by_category(db)
    assert [(r.label, r.count) for r in by_category] == [("Tops", 2), ("Bottoms", 1)]

    by_color = {r.label: (r.hex, r.count) for r in await get_breakdown_by_color(db)}
    assert by_color == {"Red": ("#DC2626", 2), "Blue": ("#2563EB", 1)}

    by_brand = {r.label: r.count for r in await get_breakdown_by_brand(db)}
    assert by_brand == {"Uniqlo": 1, "No Brand": 2}

    assert [(r.label, r.count) for r in await get_breakdown_by_season(db)] == [("Winter", 1)]


async def test_calendar_month(db):
    outfit = await add_outfit(db, "Any")
    await add_outfit_log(db, "2025-03-01", outfit_id=outfit)
    await add_outfit_log(db, "2025-03-01", outfit_id=outfit, is_ootd=True)
    await add_outfit_log(db, "2025-03-31", outfit_id=outfit)
    await add_outfit_log(db, "2025-04-01", outfit_id=outfit, is_ootd=True)

    days = await get_calendar_days_for_month(db, "2025-03")
    assert [(d.date, d.log_count, d.has_ootd) for d in days] == [
        (date(2025, 3, 1), 2, True),
        (date(2025, 3, 31), 1, False),
    ]
    assert await get_calendar_days_for_month(db, "2025-05") == []


@pytest.mark.parametrize("bad", ["2025-13", "2025-3", "March", "", "2025-03\n", " 2025-03"])
async def test_calendar_month_rejects_bad_input(db, bad):
    with pytest.raises(ValueError):
        await get_calendar_days_for_month(db, bad)


async def test_get_stats_bundles_everything(db):
    item = await add_clothing_item(db, "Tee", purchase_price=20.0)
    await _wear(db, [item], "2025-05-05")

    stats = await get_stats(db)
    assert stats.overview.worn_items == 1
    assert [i.id for i in stats.most_worn] == [item]
    assert stats.never_worn == []
    assert (await get_clothing_item(db, item)).cost_per_wear == 20.0
