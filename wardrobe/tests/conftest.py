# wardrobe/tests/conftest.py
import pytest

from wardrobe.database.database import Database


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'wardrobe.db'}"


@pytest.fixture
async def db(db_url):
    """A freshly migrated and seeded store, one file per test."""
    database = Database(db_url)
    await database.initialize()
    yield database
    await database.close()


@pytest.fixture
async def tops_id(db):
    from wardrobe.lookup_manager import get_categories

    categories = await get_categories(db)
    return next(c["id"] for c in categories if c["name"] == "Tops")


@pytest.fixture
async def lookup_ids(db):
    """name -> id maps for the tag lookups the tests use most."""
    from wardrobe.lookup_manager import get_colors, get_occasions, get_seasons

    return {
        "color": {c["name"]: c["id"] for c in await get_colors(db)},
        "season": {s["name"]: s["id"] for s in await get_seasons(db)},
        "occasion": {o["name"]: o["id"] for o in await get_occasions(db)},
    }
