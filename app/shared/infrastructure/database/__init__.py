# 📄 File: app/shared/infrastructure/database/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Groups the pieces that connect CigarMap to its PostgreSQL database.
#
# 🧪 Purpose (Technical Summary):
# Exports the declarative Base, the engine lifecycle helpers and the
# request-scoped AsyncSession dependency.
#
# 🔗 Dependencies:
# - app/shared/infrastructure/database/connection.py
# - app/shared/infrastructure/database/session.py
#
# 🔄 Connected Modules / Calls From:
# - app.main (startup and shutdown)
# - Module ORM models and presentation dependencies

from .connection import Base, close_database, database_health_check, initialize_database
from .session import get_db_session, initialize_sessions

__all__ = [
    "Base",
    "close_database",
    "database_health_check",
    "get_db_session",
    "initialize_database",
    "initialize_sessions",
]
