# 📄 File: app/modules/billing/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 billing endpoints.
# 🧪 Purpose (Technical Summary):
# Billing v1 router package.
# 🔗 Dependencies:
# billing.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
