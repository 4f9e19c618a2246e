from wardrobe.migration_manager.migration_runner import Migration


def upgrade(conn) -> None:
    conn.exec_driver_sql("ALTER TABLE outfit_logs ADD COLUMN temperature_low REAL")
    conn.exec_driver_sql("ALTER TABLE outfit_logs ADD COLUMN temperature_high REAL")
    conn.exec_driver_sql("ALTER TABLE outfit_logs ADD COLUMN weather_condition TEXT")


migration = Migration(version=3, name="outfit_weather", upgrade=upgrade)
