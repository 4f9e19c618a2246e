import os

from dotenv import load_dotenv
load_dotenv()

if os.getenv("TESTING") == "1":
    DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///wardrobe_test.db")
else:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///wardrobe.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SLOW_QUERY_MS = 200
STATS_TOP_N = 15
ARCHIVED_STATUSES = frozenset({"Sold", "Donated", "Lost"})
NO_BRAND_LABEL = "No Brand"
