import logging
from typing import List, Optional

from sqlalchemy import delete, select, update

from wardrobe.database.database import Database
from wardrobe.dates import DateLike, to_date
from wardrobe.model import Outfit, OutfitLog
from wardrobe.outfit_manager.queries import cover_image_column, item_count_column
from wardrobe.outfit_manager.views import OutfitLogWithMeta

LOG_FIELDS = frozenset({
    "outfit_id",
    "date",
    "is_ootd",
    "notes",
    "temperature_low",
    "temperature_high",
    "weather_condition",
})


async def add_outfit_log(
    db: Database,
    log_date: DateLike,
    outfit_id: Optional[int] = None,
    is_ootd: bool = False,
    notes: Optional[str] = None,
    temperature_low: Optional[float] = None,
    temperature_high: Optional[float] = None,
    weather_condition: Optional[str] = None,
) -> int:
    """
    Records that an outfit was worn on a date.

    :raises ConstraintViolationError: the date already has an outfit of the day
        and is_ootd is set, or outfit_id does not exist
    """
    async with db.transaction("add outfit log") as session:
        log = OutfitLog(
            outfit_id=outfit_id,
            date=to_date(log_date),
            is_ootd=is_ootd,
            notes=notes,
            temperature_low=temperature_low,
            temperature_high=temperature_high,
            weather_condition=weather_condition,
        )
        session.add(log)
        await session.flush()
        logging.debug(f"Logged outfit {outfit_id} on {log.date} (ootd={is_ootd})")
        return log.id


async def get_outfit_log(db: Database, log_id: int) -> Optional[dict]:
    async with db.transaction("get outfit log") as session:
        log = await session.get(OutfitLog, log_id)
        return log.to_dict() if log else None


async def get_logs_by_date(db: Database, log_date: DateLike) -> List[OutfitLogWithMeta]:
    """Logs of one day, the outfit of the day first, then in the order they were made."""
    async with db.transaction("logs by date") as session:
        result = await session.execute(
            select(
                OutfitLog,
                Outfit.name.label("outfit_name"),
                item_count_column(OutfitLog.outfit_id).label("item_count"),
                cover_image_column(OutfitLog.outfit_id).label("cover_image"),
            )
            .outerjoin(Outfit, Outfit.id == OutfitLog.outfit_id)
            .where(OutfitLog.date == to_date(log_date))
            .order_by(OutfitLog.is_ootd.desc(), OutfitLog.created_at, OutfitLog.id)
        )
        return [
            OutfitLogWithMeta(
                **row.OutfitLog.to_dict(),
                outfit_name=row.outfit_name,
                item_count=row.item_count,
                cover_image=row.cover_image,
            )
            for row in result
        ]


async def update_outfit_log(db: Database, log_id: int, **fields) -> bool:
    unknown = set(fields) - LOG_FIELDS
    if unknown:
        raise ValueError(f"Unknown outfit log fields: {sorted(unknown)}")
    if "date" in fields:
        fields["date"] = to_date(fields["date"])

    async with db.transaction("update outfit log") as session:
        log = await session.get(OutfitLog, log_id)
        if log is None:
            return False
        for key, value in fields.items():
            setattr(log, key, value)
        return True


async def delete_outfit_log(db: Database, log_id: int) -> bool:
    async with db.transaction("delete outfit log") as session:
        result = await session.execute(delete(OutfitLog).where(OutfitLog.id == log_id))
        return result.rowcount > 0


async def set_ootd(db: Database, log_id: int) -> bool:
    """Makes the log the outfit of the day for its date, demoting any previous one."""
    async with db.transaction("set ootd") as session:
        log_date = await session.scalar(select(OutfitLog.date).where(OutfitLog.id == log_id))
        if log_date is None:
            return False
        await session.execute(
            update(OutfitLog)
            .where(OutfitLog.date == log_date, OutfitLog.is_ootd.is_(True), OutfitLog.id != log_id)
            .values(is_ootd=False)
        )
        await session.execute(update(OutfitLog).where(OutfitLog.id == log_id).values(is_ootd=True))
        return True


async def clear_ootd(db: Database, log_id: int) -> bool:
    async with db.transaction("clear ootd") as session:
        result = await session.execute(update(OutfitLog).where(OutfitLog.id == log_id).values(is_ootd=False))
        return result.rowcount > 0
