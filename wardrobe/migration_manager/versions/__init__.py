# Append new migrations here, in order. Never remove, reorder or edit a released entry.
from . import v001_initial_schema, v002_app_settings, v003_outfit_weather

MIGRATIONS = [
    v001_initial_schema.migration,
    v002_app_settings.migration,
    v003_outfit_weather.migration,
]
