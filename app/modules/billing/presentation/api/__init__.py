# 📄 File: app/modules/billing/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Billing API endpoints and data formats.
# 🧪 Purpose (Technical Summary):
# Billing API package.
# 🔗 Dependencies:
# v1 routers, schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
