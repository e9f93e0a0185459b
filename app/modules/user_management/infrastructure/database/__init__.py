# 📄 File: app/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Database tables and queries for profiles and the activity diary.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models and repository implementations for user management.
# 🔗 Dependencies:
# SQLAlchemy async
# 🔄 Connected Modules / Calls From:
# user_management presentation dependencies, migrations
