# 📄 File: app/modules/billing/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Database tables and queries for billing.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models and repository implementations for billing.
# 🔗 Dependencies:
# SQLAlchemy async
# 🔄 Connected Modules / Calls From:
# Billing presentation dependencies, migrations
