import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from sqlalchemy import Column, DateTime, Integer, MetaData, Table, Text, insert, select, text
from sqlalchemy.engine import Connection

from wardrobe.exceptions import MigrationError, WardrobeError

if TYPE_CHECKING:
    from wardrobe.database.database import Database


@dataclass(frozen=True)
class Migration:
    """A forward-only schema change. Released migrations are never edited."""

    version: int
    name: str
    upgrade: Callable[[Connection], None]


ledger_metadata = MetaData()

schema_migrations = Table(
    "schema_migrations",
    ledger_metadata,
    Column("version", Integer, primary_key=True, autoincrement=False),
    Column("name", Text, nullable=False),
    Column("applied_at", DateTime, nullable=False, server_default=text("(datetime('now'))")),
)


def validate_migrations(migrations: Sequence[Migration]) -> None:
    previous = 0
    for migration in migrations:
        if not isinstance(migration.version, int) or migration.version <= previous:
            raise MigrationError(
                f"Migration versions must be strictly ascending positive integers; "
                f"got {migration.version} after {previous}"
            )
        previous = migration.version


async def applied_versions(db: "Database") -> List[int]:
    """Returns the versions recorded in the ledger, creating the ledger if needed."""
    async with db.raw_connection("read migration ledger") as conn:
        await conn.run_sync(ledger_metadata.create_all)
        result = await conn.execute(select(schema_migrations.c.version).order_by(schema_migrations.c.version))
        return [row.version for row in result]


async def migrate(db: "Database", migrations: Optional[Sequence[Migration]] = None) -> List[int]:
    """
    Applies every migration whose version is not yet in the ledger, in ascending order.

    Each migration and its ledger row are committed together or not at all.
    The first failure stops the run and is raised as MigrationError.

    :return: versions applied by this call
    """
    if migrations is None:
        from wardrobe.migration_manager.versions import MIGRATIONS
        migrations = MIGRATIONS

    validate_migrations(migrations)
    applied = set(await applied_versions(db))

    known = {m.version for m in migrations}
    unknown = sorted(applied - known)
    if unknown:
        logging.warning(f"⚠️ Ledger has versions this build does not know about: {unknown}")

    newly_applied = []
    for migration in migrations:
        if migration.version in applied:
            logging.debug(f"ℹ️ Migration {migration.version:03d} already applied. Skipping.")
            continue

        try:
            async with db.raw_connection(f"migration {migration.version:03d}") as conn:
                await conn.run_sync(migration.upgrade)
                await conn.execute(
                    insert(schema_migrations).values(version=migration.version, name=migration.name)
                )
        except WardrobeError as e:
            logging.critical(f"❌ Migration {migration.version:03d} ({migration.name}) failed, store is not usable")
            raise MigrationError(f"Migration {migration.version:03d} ({migration.name}) failed: {e}") from e

        logging.info(f"🛠️ Applied migration {migration.version:03d} ({migration.name})")
        newly_applied.append(migration.version)

    if not newly_applied:
        logging.info("Schema is up to date.")
    return newly_applied
