import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncConnection,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from wardrobe.constants import DATABASE_URL
from wardrobe.database.query_logger import run_transaction


def _install_sqlite_listeners(engine: AsyncEngine) -> None:
    # pysqlite never opens a transaction before DDL on its own; emitting BEGIN
    # ourselves keeps a migration and its ledger row in one atomic unit.
    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")


class Database:
    """
    Handle on the local wardrobe store.

    Every unit of work goes through one asyncio lock, so statements are
    serialised and a reader never sees half of a multi-statement write.
    Migrations and seeding run once, on first use; concurrent first callers
    all await the same bootstrap.
    """

    def __init__(
        self,
        url: str = DATABASE_URL,
        *,
        migrations: Optional[Sequence] = None,
        run_seed: bool = True,
        echo: bool = False,
    ):
        self.url = url
        self.engine = create_async_engine(url, echo=echo)
        _install_sqlite_listeners(self.engine)
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)
        self.migrations = migrations
        self.run_seed = run_seed
        self._lock = asyncio.Lock()
        self._ready: Optional[asyncio.Future] = None

    @classmethod
    def from_env(cls) -> "Database":
        return cls(DATABASE_URL)

    @property
    def is_ready(self) -> bool:
        return (
            self._ready is not None
            and self._ready.done()
            and not self._ready.cancelled()
            and self._ready.exception() is None
        )

    async def initialize(self) -> None:
        """Run migrations and seeding exactly once; later calls reuse the outcome."""
        if self._ready is None:
            self._ready = asyncio.ensure_future(self._bootstrap())
        await asyncio.shield(self._ready)

    async def _bootstrap(self) -> None:
        from wardrobe.migration_manager import migrate
        from wardrobe.seeding_manager import seed

        logging.info(f"🚀 Opening wardrobe store at {self.engine.url}")
        await migrate(self, self.migrations)
        if self.run_seed:
            await seed(self)
        logging.info("✅ Wardrobe store is ready")

    @asynccontextmanager
    async def transaction(self, label: str) -> AsyncIterator[AsyncSession]:
        """Gated unit of work: waits for bootstrap, commits on success, rolls back on error."""
        await self.initialize()
        async with self.raw_transaction(label) as session:
            yield session

    @asynccontextmanager
    async def raw_transaction(self, label: str) -> AsyncIterator[AsyncSession]:
        async with self._lock, run_transaction(label):
            async with self.session_factory() as session, session.begin():
                yield session

    @asynccontextmanager
    async def raw_connection(self, label: str) -> AsyncIterator[AsyncConnection]:
        async with self._lock, run_transaction(label):
            async with self.engine.begin() as conn:
                yield conn

    async def close(self) -> None:
        await self.engine.dispose()
