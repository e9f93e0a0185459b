# 📄 File: app/modules/billing/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for plans and billing.
# 🧪 Purpose (Technical Summary):
# Billing presentation layer package.
# 🔗 Dependencies:
# FastAPI, billing services
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
