import logging
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert

from wardrobe.exceptions import SeedError, WardrobeError
from wardrobe.model import Category, Color, Material, Occasion, Pattern, Season, SizeSystem, SizeValue, Subcategory

if TYPE_CHECKING:
    from wardrobe.database.database import Database

CATEGORIES = [
    {
        "name": "Tops",
        "icon": "t-shirt",
        "sort_order": 1,
        "subcategories": [
            "T-Shirt", "Tank Top", "Blouse", "Shirt", "Polo",
            "Sweater", "Hoodie", "Sweatshirt", "Cardigan", "Bodysuit",
        ],
    },
    {
        "name": "Bottoms",
        "icon": "pants",
        "sort_order": 2,
        "subcategories": [
            "Jeans", "Trousers/Slacks", "Chinos", "Shorts", "Skirt", "Leggings", "Joggers/Sweatpants",
        ],
    },
    {
        "name": "Outerwear",
        "icon": "hoodie",
        "sort_order": 3,
        "subcategories": ["Jacket", "Coat", "Blazer", "Vest", "Raincoat"],
    },
    {
        "name": "Dresses & Jumpsuits",
        "icon": "dress",
        "sort_order": 4,
        "subcategories": ["Dress", "Romper", "Jumpsuit"],
    },
    {
        "name": "Footwear",
        "icon": "sneaker",
        "sort_order": 5,
        "subcategories": ["Sneakers", "Boots", "Sandals", "Dress Shoes", "Slippers"],
    },
    {
        "name": "Accessories",
        "icon": "watch",
        "sort_order": 6,
        "subcategories": ["Belt", "Hat/Cap", "Scarf", "Sunglasses", "Watch", "Jewelry", "Tie", "Cufflinks"],
    },
    {
        "name": "Bags",
        "icon": "handbag",
        "sort_order": 7,
        "subcategories": ["Backpack", "Tote", "Crossbody", "Duffel"],
    },
    {
        "name": "Activewear",
        "icon": "person-simple-run",
        "sort_order": 8,
        "subcategories": ["Sports Bra", "Athletic Shorts", "Track Jacket"],
    },
    {
        "name": "Underwear & Intimates",
        "icon": "sock",
        "sort_order": 9,
        "subcategories": ["Underwear", "Bra/Bralette", "Socks", "Tights"],
    },
    {
        "name": "Swimwear",
        "icon": "goggles",
        "sort_order": 10,
        "subcategories": ["One-Piece", "Bikini/Trunks", "Rash Guard"],
    },
]

SEASONS = [
    {"name": "Spring", "icon": "flower"},
    {"name": "Summer", "icon": "sun"},
    {"name": "Fall", "icon": "leaf"},
    {"name": "Winter", "icon": "snowflake"},
    {"name": "All Season", "icon": "thermometer"},
]

OCCASIONS = [
    {"name": "Casual", "icon": "coffee"},
    {"name": "Work/Business", "icon": "briefcase"},
    {"name": "Formal", "icon": "crown-simple"},
    {"name": "Athletic", "icon": "barbell"},
    {"name": "Loungewear", "icon": "couch"},
    {"name": "Date Night", "icon": "heart"},
    {"name": "Vacation", "icon": "island"},
    {"name": "Outdoor/Hiking", "icon": "mountains"},
    {"name": "Special Occasion", "icon": "cheers"},
]

MATERIALS = [
    "Cotton", "Polyester", "Wool", "Linen", "Silk", "Denim", "Leather", "Faux Leather",
    "Suede", "Velvet", "Cashmere", "Nylon", "Spandex/Elastane", "Rayon/Viscose", "Fleece",
    "Chiffon", "Satin", "Corduroy", "Jersey", "Mesh", "Modal", "Bamboo", "Other",
]

PATTERNS = [
    "Solid", "Striped", "Plaid/Tartan", "Checkered", "Floral", "Geometric", "Animal Print",
    "Abstract", "Tie-Dye", "Camouflage", "Paisley", "Polka Dot", "Houndstooth", "Graphic",
    "Color Block", "Ombre", "Other",
]

SIZE_SYSTEMS = [
    {"name": "Letter", "values": ["XS", "S", "M", "L", "XL", "XXL", "XXXL"]},
    {"name": "Women's Numeric", "values": ["00", "0", "2", "4", "6", "8", "10", "12", "14", "16"]},
    {
        "name": "Shoes (US Men's)",
        "values": ["6", "6.5", "7", "7.5", "8", "8.5", "9", "9.5", "10", "10.5", "11", "11.5", "12", "13", "14", "15"],
    },
    {
        "name": "Shoes (US Women's)",
        "values": ["5", "5.5", "6", "6.5", "7", "7.5", "8", "8.5", "9", "9.5", "10", "11"],
    },
    {
        "name": "Shoes (EU)",
        "values": ["35", "36", "37", "38", "39", "40", "41", "42", "43", "44", "45", "46", "47", "48"],
    },
    {
        "name": "Shoes (UK)",
        "values": [
            "3", "3.5", "4", "4.5", "5", "5.5", "6", "6.5", "7", "7.5",
            "8", "8.5", "9", "9.5", "10", "10.5", "11", "11.5", "12", "13", "14",
        ],
    },
    {
        "name": "Bra",
        "values": [
            "30A", "30B", "30C", "30D",
            "32A", "32B", "32C", "32D",
            "34A", "34B", "34C", "34D", "34DD",
            "36A", "36B", "36C", "36D", "36DD",
            "38B", "38C", "38D", "38DD",
        ],
    },
    {"name": "One Size", "values": ["One Size"]},
]

# hex values are display hints only
COLORS = [
    {"name": "Black", "hex": "#0A0A0A"},
    {"name": "White", "hex": "#F5F5F5"},
    {"name": "Grey", "hex": "#808080"},
    {"name": "Beige", "hex": "#C8A97A"},
    {"name": "Brown", "hex": "#7B4F2E"},
    {"name": "Tan", "hex": "#C4974F"},
    {"name": "Navy", "hex": "#1B2A4A"},
    {"name": "Blue", "hex": "#2563EB"},
    {"name": "Light Blue", "hex": "#93C5FD"},
    {"name": "Teal", "hex": "#0D9488"},
    {"name": "Green", "hex": "#16A34A"},
    {"name": "Olive", "hex": "#6B7C3A"},
    {"name": "Yellow", "hex": "#EAB308"},
    {"name": "Orange", "hex": "#EA580C"},
    {"name": "Red", "hex": "#DC2626"},
    {"name": "Burgundy", "hex": "#7F1D1D"},
    {"name": "Pink", "hex": "#EC4899"},
    {"name": "Blush", "hex": "#F4A8B8"},
    {"name": "Purple", "hex": "#7C3AED"},
    {"name": "Lavender", "hex": "#C4B5FD"},
    {"name": "Gold", "hex": "#CA8A04"},
    {"name": "Silver", "hex": "#9CA3AF"},
    {"name": "Cream", "hex": "#FEF9EF"},
    {"name": "Charcoal", "hex": "#374151"},
    {"name": "Camel", "hex": "#C19A6B"},
    {"name": "Multicolor", "hex": None},
]


async def seed_categories(db: "Database"):
    async with db.raw_transaction("seed categories") as session:
        for category_data in CATEGORIES:
            await session.execute(
                insert(Category.__table__)
                .values(name=category_data["name"], icon=category_data["icon"], sort_order=category_data["sort_order"])
                .on_conflict_do_nothing(index_elements=["name"])
            )
            # Works whether the row was just inserted or already existed.
            category_id = await session.scalar(select(Category.id).where(Category.name == category_data["name"]))
            if category_id is None:
                continue

            for position, name in enumerate(category_data["subcategories"], start=1):
                await session.execute(
                    insert(Subcategory.__table__)
                    .values(category_id=category_id, name=name, sort_order=position)
                    .on_conflict_do_nothing(index_elements=["category_id", "name"])
                )


async def seed_seasons(db: "Database"):
    async with db.raw_transaction("seed seasons") as session:
        await session.execute(insert(Season.__table__).on_conflict_do_nothing(index_elements=["name"]), SEASONS)


async def seed_occasions(db: "Database"):
    async with db.raw_transaction("seed occasions") as session:
        await session.execute(insert(Occasion.__table__).on_conflict_do_nothing(index_elements=["name"]), OCCASIONS)


async def seed_materials(db: "Database"):
    async with db.raw_transaction("seed materials") as session:
        await session.execute(
            insert(Material.__table__).on_conflict_do_nothing(index_elements=["name"]),
            [{"name": name} for name in MATERIALS],
        )


async def seed_patterns(db: "Database"):
    async with db.raw_transaction("seed patterns") as session:
        await session.execute(
            insert(Pattern.__table__).on_conflict_do_nothing(index_elements=["name"]),
            [{"name": name} for name in PATTERNS],
        )


async def seed_sizes(db: "Database"):
    async with db.raw_transaction("seed sizes") as session:
        for system in SIZE_SYSTEMS:
            await session.execute(
                insert(SizeSystem.__table__).values(name=system["name"]).on_conflict_do_nothing(index_elements=["name"])
            )
            system_id = await session.scalar(select(SizeSystem.id).where(SizeSystem.name == system["name"]))
            if system_id is None:
                continue

            for position, value in enumerate(system["values"], start=1):
                await session.execute(
                    insert(SizeValue.__table__)
                    .values(size_system_id=system_id, value=value, sort_order=position)
                    .on_conflict_do_nothing(index_elements=["size_system_id", "value"])
                )


async def seed_colors(db: "Database"):
    async with db.raw_transaction("seed colors") as session:
        await session.execute(insert(Color.__table__).on_conflict_do_nothing(index_elements=["name"]), COLORS)


# Categories come first: subcategories need their parent ids. The rest are independent.
SEED_STEPS = [
    ("categories", seed_categories),
    ("seasons", seed_seasons),
    ("occasions", seed_occasions),
    ("materials", seed_materials),
    ("patterns", seed_patterns),
    ("sizes", seed_sizes),
    ("colors", seed_colors),
]


async def seed(db: "Database", steps=None):
    """
    Inserts the canonical reference rows. Safe to call on every start.

    Each step is its own transaction, so one failing step leaves the others
    (and everything seeded earlier) intact. Failures are collected and raised
    together as SeedError once every step has had its turn.
    """
    failed = []
    for name, step in steps or SEED_STEPS:
        try:
            await step(db)
            logging.debug(f"✅ {name.capitalize()} seeded.")
        except WardrobeError as e:
            logging.error(f"❌ Failed to seed {name}: {e}")
            failed.append(name)

    if failed:
        raise SeedError(failed)
    logging.info("✅ All reference data seeded successfully.")
