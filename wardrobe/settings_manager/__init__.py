from .settings import (
    ACCENT_KEYS,
    DEFAULT_SETTINGS,
    SETTING_KEYS,
    TEMPERATURE_UNITS,
    AppSettings,
    SettingsManager,
    get_all_settings,
    set_setting,
    setting_to_row,
    settings_from_rows,
    settings_to_rows,
)
