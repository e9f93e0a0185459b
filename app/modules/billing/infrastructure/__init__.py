# 📄 File: app/modules/billing/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# How plans, subscriptions and payments are saved in the database.
# 🧪 Purpose (Technical Summary):
# Billing infrastructure layer package.
# 🔗 Dependencies:
# SQLAlchemy
# 🔄 Connected Modules / Calls From:
# Billing presentation dependencies
