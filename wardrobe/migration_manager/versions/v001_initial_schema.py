"""Initial schema.

Lookup tables, clothing items with their tag junctions, outfits and the wear
journal. No derived values are stored; wear count and cost per wear are always
computed at query time.
"""
import sqlalchemy as sa

from wardrobe.migration_manager.migration_runner import Migration

NOW = sa.text("(datetime('now'))")


def _junction(metadata: sa.MetaData, name: str, tag_column: str, tag_table: str) -> sa.Table:
    return sa.Table(
        name,
        metadata,
        sa.Column("clothing_item_id", sa.Integer, sa.ForeignKey("clothing_items.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(tag_column, sa.Integer, sa.ForeignKey(f"{tag_table}.id", ondelete="CASCADE"), primary_key=True),
    )


def upgrade(conn) -> None:
    metadata = sa.MetaData()

    # Lookup / reference tables
    categories = sa.Table(
        "categories",
        metadata,
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
        sa.Column("icon", sa.Text),
        sa.Column("sort_order", sa.Integer, nullable=False, server_default=sa.text("0")),
    )
    subcategories = sa.Table(
        "subcategories",
        metadata,
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("category_id", sa.Integer, sa.ForeignKey("categories.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("sort_order", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.UniqueConstraint("category_id", "name"),
    )
    for name in ("seasons", "occasions"):
        sa.Table(
            name,
            metadata,
            sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
            sa.Column("name", sa.Text, nullable=False, unique=True),
            sa.Column("icon", sa.Text),
        )
    sa.Table(
        "colors",
        metadata,
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
        sa.Column("hex", sa.Text),
    )
    for name in ("materials", "patterns", "size_systems"):
        sa.Table(
            name,
            metadata,
            sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
            sa.Column("name", sa.Text, nullable=False, unique=True),
        )
    size_values = sa.Table(
        "size_values",
        metadata,
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("size_system_id", sa.Integer, sa.ForeignKey("size_systems.id", ondelete="CASCADE"), nullable=False),
        sa.Column("value", sa.Text, nullable=False),
        sa.Column("sort_order", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.UniqueConstraint("size_system_id", "value"),
    )

    # Core clothing item
    clothing_items = sa.Table(
        "clothing_items",
        metadata,
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("brand", sa.Text),
        sa.Column("category_id", sa.Integer, sa.ForeignKey("categories.id", ondelete="SET NULL")),
        sa.Column("subcategory_id", sa.Integer, sa.ForeignKey("subcategories.id", ondelete="SET NULL")),
        sa.Column("size_value_id", sa.Integer, sa.ForeignKey("size_values.id", ondelete="SET NULL")),
        sa.Column("waist", sa.Float),
        sa.Column("inseam", sa.Float),
        sa.Column("purchase_price", sa.Float),
        sa.Column("purchase_date", sa.Date),
        sa.Column("purchase_location", sa.Text),
        sa.Column("image_path", sa.Text),
        sa.Column("notes", sa.Text),
        sa.Column("status", sa.Text, nullable=False, server_default=sa.text("'Active'")),
        sa.Column("wash_status", sa.Text, nullable=False, server_default=sa.text("'Clean'")),
        sa.Column("is_favorite", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=NOW),
        sa.Column("updated_at", sa.DateTime, nullable=False, server_default=NOW),
        sa.CheckConstraint("status IN ('Active','Sold','Donated','Lost')", name="ck_clothing_items_status"),
        sa.CheckConstraint("wash_status IN ('Clean','Dirty')", name="ck_clothing_items_wash_status"),
        sa.CheckConstraint("is_favorite IN (0,1)", name="ck_clothing_items_is_favorite"),
    )

    _junction(metadata, "clothing_item_colors", "color_id", "colors")
    _junction(metadata, "clothing_item_materials", "material_id", "materials")
    _junction(metadata, "clothing_item_seasons", "season_id", "seasons")
    _junction(metadata, "clothing_item_occasions", "occasion_id", "occasions")
    _junction(metadata, "clothing_item_patterns", "pattern_id", "patterns")

    # Outfits
    sa.Table(
        "outfits",
        metadata,
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text),
        sa.Column("notes", sa.Text),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=NOW),
        sa.Column("updated_at", sa.DateTime, nullable=False, server_default=NOW),
    )
    sa.Table(
        "outfit_items",
        metadata,
        sa.Column("outfit_id", sa.Integer, sa.ForeignKey("outfits.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("clothing_item_id", sa.Integer, sa.ForeignKey("clothing_items.id", ondelete="CASCADE"), primary_key=True),
    )

    # Wear journal
    outfit_logs = sa.Table(
        "outfit_logs",
        metadata,
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("outfit_id", sa.Integer, sa.ForeignKey("outfits.id", ondelete="SET NULL")),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("is_ootd", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("notes", sa.Text),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=NOW),
        sa.CheckConstraint("is_ootd IN (0,1)", name="ck_outfit_logs_is_ootd"),
    )

    # Only one OOTD per calendar day; the partial index ignores is_ootd = 0 rows.
    sa.Index("one_ootd_per_day", outfit_logs.c.date, unique=True, sqlite_where=sa.text("is_ootd = 1"))

    sa.Index("idx_clothing_items_category", clothing_items.c.category_id)
    sa.Index("idx_clothing_items_status", clothing_items.c.status)
    sa.Index("idx_clothing_items_is_favorite", clothing_items.c.is_favorite)
    sa.Index("idx_outfit_logs_date", outfit_logs.c.date)
    sa.Index("idx_subcategories_category", subcategories.c.category_id)
    sa.Index("idx_size_values_system", size_values.c.size_system_id)

    metadata.create_all(conn, checkfirst=False)


migration = Migration(version=1, name="initial_schema", upgrade=upgrade)
