from datetime import date, datetime

import pytest

from wardrobe.clothing_manager import ClothingItemWithMeta, add_clothing_item, set_item_tags
from wardrobe.filter_manager import (
    ActiveFilters,
    SortKey,
    active_filter_count,
    apply_membership,
    apply_scalar_filters,
    intersect_memberships,
    resolve_closet_view,
    sort_items,
)


def make_item(item_id, name="Item", **overrides):
    values = dict(
        id=item_id,
        name=name,
        brand=None,
        category_id=None,
        subcategory_id=None,
        size_value_id=None,
        waist=None,
        inseam=None,
        purchase_price=None,
        purchase_date=None,
        purchase_location=None,
        image_path=None,
        notes=None,
        status="Active",
        wash_status="Clean",
        is_favorite=False,
        created_at=datetime(2025, 1, 1),
        updated_at=datetime(2025, 1, 1),
        wear_count=0,
    )
    values.update(overrides)
    return ClothingItemWithMeta(**values)


async def test_junction_filters_intersect(db, lookup_ids):
    red, blue = lookup_ids["color"]["Red"], lookup_ids["color"]["Blue"]
    summer, winter = lookup_ids["season"]["Summer"], lookup_ids["season"]["Winter"]

    a = await add_clothing_item(db, "A")
    b = await add_clothing_item(db, "B")
    c = await add_clothing_item(db, "C")
    for item_id, color, season in ((a, red, summer), (b, red, winter), (c, blue, summer)):
        await set_item_tags(db, item_id, "color", [color])
        await set_item_tags(db, item_id, "season", [season])

    view = await resolve_closet_view(db, ActiveFilters(color_id=red, season_id=summer))
    assert [i.id for i in view] == [a]

    view = await resolve_closet_view(db, ActiveFilters(color_id=red))
    assert {i.id for i in view} == {a, b}


async def test_no_filters_returns_everything_newest_first(db):
    first = await add_clothing_item(db, "First")
    second = await add_clothing_item(db, "Second")
    assert [i.id for i in await resolve_closet_view(db)] == [second, first]


def test_intersection_without_memberships_is_none():
    assert intersect_memberships([]) is None
    assert intersect_memberships([{1, 2, 3}, {2, 3}, {3, 4}]) == {3}
    assert intersect_memberships([{1}, {2}]) == set()


def test_membership_none_keeps_everything():
    items = [make_item(1), make_item(2)]
    assert apply_membership(items, None) == items
    assert apply_membership(items, set()) == []
    assert [i.id for i in apply_membership(items, {2})] == [2]


def test_brand_filter_ignores_case():
    items = [make_item(1, brand="Uniqlo"), make_item(2, brand="UNIQLO"), make_item(3, brand="Gap"), make_item(4)]
    result = apply_scalar_filters(items, ActiveFilters(brand="uniqlo"))
    assert [i.id for i in result] == [1, 2]


def test_search_matches_name_or_brand():
    items = [make_item(1, "Navy Oxford Shirt"), make_item(2, "Chinos", brand="Oxford Co"), make_item(3, "Tee")]
    assert [i.id for i in apply_scalar_filters(items, ActiveFilters(search=" OXFORD "))] == [1, 2]


def test_archived_items_hidden_unless_status_asked_for():
    items = [make_item(1), make_item(2, status="Sold"), make_item(3, status="Lost")]

    assert [i.id for i in apply_scalar_filters(items, ActiveFilters(), show_archived_items=False)] == [1]
    assert [i.id for i in apply_scalar_filters(items, ActiveFilters(), show_archived_items=True)] == [1, 2, 3]

    sold = apply_scalar_filters(items, ActiveFilters(status="Sold"), show_archived_items=False)
    assert [i.id for i in sold] == [2]


def test_category_and_subcategory_filters():
    items = [
        make_item(1, category_id=1, subcategory_id=10),
        make_item(2, category_id=1, subcategory_id=11),
        make_item(3, category_id=2),
    ]
    assert [i.id for i in apply_scalar_filters(items, ActiveFilters(category_id=1))] == [1, 2]
    assert [i.id for i in apply_scalar_filters(items, ActiveFilters(category_id=1, subcategory_id=11))] == [2]


def test_recently_added_sort_is_stable():
    same_time = datetime(2025, 3, 1, 12, 0)
    items = [
        make_item(1, created_at=same_time),
        make_item(2, created_at=datetime(2025, 3, 2)),
        make_item(3, created_at=same_time),
    ]
    first = [i.id for i in sort_items(items, SortKey.recently_added)]
    second = [i.id for i in sort_items(items, SortKey.recently_added)]
    assert first == second == [2, 1, 3]


def test_name_sorts_ignore_case():
    items = [make_item(1, "banana"), make_item(2, "Apple"), make_item(3, "cherry")]
    assert [i.name for i in sort_items(items, SortKey.name_asc)] == ["Apple", "banana", "cherry"]
    assert [i.name for i in sort_items(items, "name_desc")] == ["cherry", "banana", "Apple"]


def test_wear_sorts_keep_ties_in_order():
    items = [make_item(1, wear_count=2), make_item(2, wear_count=5), make_item(3, wear_count=2)]
    assert [i.id for i in sort_items(items, SortKey.most_worn)] == [2, 1, 3]
    assert [i.id for i in sort_items(items, SortKey.least_worn)] == [1, 3, 2]


def test_purchase_date_sort_puts_undated_last():
    items = [
        make_item(1),
        make_item(2, purchase_date=date(2023, 1, 1)),
        make_item(3, purchase_date=date(2024, 6, 1)),
        make_item(4),
    ]
    assert [i.id for i in sort_items(items, SortKey.purchase_date)] == [3, 2, 1, 4]


def test_unknown_sort_key():
    with pytest.raises(ValueError):
        sort_items([], "price")


def test_active_filter_count():
    assert active_filter_count(ActiveFilters()) == 0
    assert active_filter_count(ActiveFilters(color_id=1, brand="Gap", search="")) == 2
