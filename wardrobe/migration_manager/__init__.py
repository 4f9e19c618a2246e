from .migration_runner import Migration, applied_versions, migrate, validate_migrations
from .versions import MIGRATIONS
