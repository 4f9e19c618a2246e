import asyncio
from datetime import date

import pytest

from wardrobe.clothing_manager import add_clothing_item, update_clothing_item
from wardrobe.exceptions import ConstraintViolationError
from wardrobe.lookup_manager import get_categories
from wardrobe.outfit_manager import (
    add_outfit,
    add_outfit_log,
    clear_ootd,
    delete_outfit,
    delete_outfit_log,
    get_logs_by_date,
    get_outfit,
    get_outfit_item_ids,
    get_outfit_log,
    get_outfit_with_items,
    list_outfits,
    set_ootd,
    update_outfit,
    update_outfit_log,
)


async def test_outfit_membership_is_replace_all(db):
    shirt = await add_clothing_item(db, "Shirt")
    pants = await add_clothing_item(db, "Pants")
    shoes = await add_clothing_item(db, "Shoes")

    outfit_id = await add_outfit(db, "Office", item_ids=[shirt, pants, pants])
    assert await get_outfit_item_ids(db, outfit_id) == sorted([shirt, pants])

    assert await update_outfit(db, outfit_id, item_ids=[shoes]) is True
    assert await get_outfit_item_ids(db, outfit_id) == [shoes]

    # name only: membership stays
    await update_outfit(db, outfit_id, name="Friday")
    assert await get_outfit_item_ids(db, outfit_id) == [shoes]
    assert (await get_outfit(db, outfit_id))["name"] == "Friday"


async def test_update_outfit_refreshes_updated_at(db):
    shirt = await add_clothing_item(db, "Shirt")
    outfit_id = await add_outfit(db, "Weekend")
    created = (await get_outfit(db, outfit_id))["updated_at"]
    await asyncio.sleep(0.01)

    await update_outfit(db, outfit_id, notes="Brunch")
    renamed = (await get_outfit(db, outfit_id))["updated_at"]
    assert renamed > created
    await asyncio.sleep(0.01)

    await update_outfit(db, outfit_id, item_ids=[shirt])
    assert (await get_outfit(db, outfit_id))["updated_at"] > renamed


async def test_missing_outfit(db):
    assert await get_outfit(db, 42) is None
    assert await get_outfit_with_items(db, 42) is None
    assert await update_outfit(db, 42, name="x") is False
    assert await delete_outfit(db, 42) is False


async def test_outfit_with_items_ordered_by_category(db):
    categories = await get_categories(db)
    tops, bottoms = categories[0]["id"], categories[1]["id"]
    jeans = await add_clothing_item(db, "Jeans", category_id=bottoms)
    tee = await add_clothing_item(db, "Tee", category_id=tops)
    blouse = await add_clothing_item(db, "Blouse", category_id=tops)

    outfit_id = await add_outfit(db, item_ids=[jeans, tee, blouse])
    outfit = await get_outfit_with_items(db, outfit_id)
    assert [i.name for i in outfit.items] == ["Blouse", "Tee", "Jeans"]


async def test_list_outfits_with_meta(db):
    plain = await add_clothing_item(db, "Plain")
    pictured = await add_clothing_item(db, "Pictured", image_path="items/pictured.jpg")
    first = await add_outfit(db, "Empty")
    second = await add_outfit(db, "Full", item_ids=[plain, pictured])

    outfits = await list_outfits(db)
    assert [o.id for o in outfits] == [second, first]
    assert outfits[0].item_count == 2
    assert outfits[0].cover_image == "items/pictured.jpg"
    assert outfits[1].item_count == 0
    assert outfits[1].cover_image is None


async def test_one_ootd_per_day(db):
    a = await add_outfit(db, "A")
    b = await add_outfit(db, "B")
    await add_outfit_log(db, "2025-03-21", outfit_id=a, is_ootd=True)

    with pytest.raises(ConstraintViolationError):
        await add_outfit_log(db, "2025-03-21", outfit_id=b, is_ootd=True)

    # a plain log on the same day and an ootd on another day are fine
    await add_outfit_log(db, "2025-03-21", outfit_id=b)
    await add_outfit_log(db, "2025-03-22", outfit_id=b, is_ootd=True)


async def test_logs_by_date_put_ootd_first(db):
    item = await add_clothing_item(db, "Coat", image_path="items/coat.jpg")
    a = await add_outfit(db, "Morning", item_ids=[item])
    b = await add_outfit(db, "Evening")
    first = await add_outfit_log(db, date(2025, 1, 5), outfit_id=b)
    second = await add_outfit_log(db, date(2025, 1, 5), outfit_id=a, is_ootd=True)
    await add_outfit_log(db, date(2025, 1, 6), outfit_id=a)

    logs = await get_logs_by_date(db, "2025-01-05")
    assert [log.id for log in logs] == [second, first]
    assert logs[0].outfit_name == "Morning"
    assert logs[0].item_count == 1
    assert logs[0].cover_image == "items/coat.jpg"
    assert logs[1].item_count == 0


async def test_set_ootd_moves_the_flag(db):
    outfit = await add_outfit(db, "Any")
    first = await add_outfit_log(db, "2025-02-01", outfit_id=outfit, is_ootd=True)
    second = await add_outfit_log(db, "2025-02-01", outfit_id=outfit)

    assert await set_ootd(db, second) is True
    assert (await get_outfit_log(db, first))["is_ootd"] is False
    assert (await get_outfit_log(db, second))["is_ootd"] is True

    assert await clear_ootd(db, second) is True
    assert (await get_outfit_log(db, second))["is_ootd"] is False
    assert await set_ootd(db, 999) is False


async def test_update_and_delete_log(db):
    log_id = await add_outfit_log(db, "2025-04-01", notes="rainy")
    assert await update_outfit_log(db, log_id, temperature_low=8.5, weather_condition="Rain") is True

    log = await get_outfit_log(db, log_id)
    assert log["notes"] == "rainy"
    assert log["temperature_low"] == 8.5
    assert log["weather_condition"] == "Rain"

    assert await delete_outfit_log(db, log_id) is True
    assert await get_outfit_log(db, log_id) is None
    assert await delete_outfit_log(db, log_id) is False


async def test_log_for_unknown_outfit_fails(db):
    with pytest.raises(ConstraintViolationError):
        await add_outfit_log(db, "2025-04-01", outfit_id=4242)


async def test_deleting_outfit_keeps_its_logs(db):
    item = await add_clothing_item(db, "Tee")
    outfit = await add_outfit(db, "Gone soon", item_ids=[item])
    log_id = await add_outfit_log(db, "2025-03-21", outfit_id=outfit, is_ootd=True)

    await delete_outfit(db, outfit)

    log = await get_outfit_log(db, log_id)
    assert log["outfit_id"] is None
    assert log["date"] == date(2025, 3, 21)
    assert log["is_ootd"] is True
