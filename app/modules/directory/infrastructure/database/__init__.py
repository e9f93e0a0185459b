# 📄 File: app/modules/directory/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Database tables and queries for cities and lounges.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models and repository implementations for the directory.
# 🔗 Dependencies:
# SQLAlchemy async
# 🔄 Connected Modules / Calls From:
# Directory presentation dependencies, migrations
