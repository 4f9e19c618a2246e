"""Key/value table for user preferences.

The defaults are inserted here so that upgraded installs get them too; this
migration is their only source.
"""
import sqlalchemy as sa
from sqlalchemy.dialects.sqlite import insert

from wardrobe.migration_manager.migration_runner import Migration

DEFAULT_SETTINGS = {
    "accent_key": "amber",
    "currency_symbol": "$",
    "week_start_day": "0",
    "temperature_unit": "F",
    "show_archived_items": "0",
}


def upgrade(conn) -> None:
    metadata = sa.MetaData()
    app_settings = sa.Table(
        "app_settings",
        metadata,
        sa.Column("key", sa.Text, primary_key=True, nullable=False),
        sa.Column("value", sa.Text, nullable=False),
    )
    metadata.create_all(conn)

    rows = [{"key": key, "value": value} for key, value in DEFAULT_SETTINGS.items()]
    conn.execute(insert(app_settings).on_conflict_do_nothing(index_elements=["key"]), rows)


migration = Migration(version=2, name="app_settings", upgrade=upgrade)
