import asyncio
import logging
from typing import Dict, Literal, Mapping, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert

from wardrobe.database.database import Database
from wardrobe.model import AppSetting

AccentKey = Literal["amber", "coral", "sage", "sky", "lavender", "rose"]
TemperatureUnit = Literal["F", "C"]
WeekStartDay = Literal[0, 1]  # 0 = Sunday, 1 = Monday

ACCENT_KEYS = get_args(AccentKey)
TEMPERATURE_UNITS = get_args(TemperatureUnit)


class AppSettings(BaseModel):
    """User preferences, one typed field per stored key."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    accent_key: AccentKey = "amber"
    currency_symbol: str = Field(default="$", min_length=1)
    week_start_day: WeekStartDay = 0
    temperature_unit: TemperatureUnit = "F"
    show_archived_items: bool = False  # hides Sold/Donated/Lost items from the closet when False

    def updated(self, field: str, value) -> "AppSettings":
        """
        Copy with one field changed.

        :raises ValidationError: unknown field or a value the field does not accept
        """
        return AppSettings.model_validate({**self.model_dump(), field: value})


DEFAULT_SETTINGS = AppSettings()
SETTING_KEYS = tuple(AppSettings.model_fields)

# stored string -> candidate value, checked afterwards by the model
ROW_DECODERS = {
    "accent_key": str,
    "currency_symbol": str,
    "week_start_day": int,
    "temperature_unit": str,
    "show_archived_items": lambda raw: raw == "1",
}


def _encode(value) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def settings_from_rows(rows: Mapping[str, str]) -> AppSettings:
    """Decode the flat key/value rows; anything missing or unrecognised keeps its default."""
    settings = DEFAULT_SETTINGS
    for field, decode in ROW_DECODERS.items():
        if field not in rows:
            continue
        try:
            settings = settings.updated(field, decode(rows[field]))
        except ValueError:
            logging.warning(f"⚠️ Ignoring stored setting {field}={rows[field]!r}, using default")
    return settings


def setting_to_row(field: str, value) -> str:
    """
    Encode one typed setting to its stored string.

    :raises ValidationError: unknown field or a value the field does not accept
    """
    DEFAULT_SETTINGS.updated(field, value)
    return _encode(value)


def settings_to_rows(settings: AppSettings) -> Dict[str, str]:
    return {key: _encode(value) for key, value in settings.model_dump().items()}


async def get_all_settings(db: Database) -> Dict[str, str]:
    async with db.transaction("get settings") as session:
        result = await session.execute(select(AppSetting.key, AppSetting.value))
        return {row.key: row.value for row in result}


async def set_setting(db: Database, key: str, value: str) -> None:
    """Upserts a single raw setting row."""
    statement = insert(AppSetting.__table__).values(key=key, value=value)
    statement = statement.on_conflict_do_update(
        index_elements=["key"], set_={"value": statement.excluded.value}
    )
    async with db.transaction("set setting") as session:
        await session.execute(statement)


class SettingsManager:
    """
    Typed, cached view of the app settings.

    Loaded once on first access; set() is the only way to change a value and
    writes through to the store before updating the cache.
    """

    def __init__(self, db: Database):
        self.db = db
        self._settings: Optional[AppSettings] = None
        self._lock = asyncio.Lock()

    @property
    def loaded(self) -> bool:
        return self._settings is not None

    async def get(self) -> AppSettings:
        if self._settings is None:
            async with self._lock:
                if self._settings is None:
                    self._settings = settings_from_rows(await get_all_settings(self.db))
                    logging.debug(f"Loaded settings: {self._settings}")
        return self._settings

    async def set(self, field: str, value) -> AppSettings:
        current = await self.get()
        updated = current.updated(field, value)
        async with self._lock:
            await set_setting(self.db, field, _encode(value))
            self._settings = updated
        logging.info(f"⚙️ Setting {field} = {_encode(value)}")
        return self._settings
