# 📄 File: app/modules/onboarding/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Onboarding API endpoints and data formats.
# 🧪 Purpose (Technical Summary):
# Onboarding API package.
# 🔗 Dependencies:
# v1 routers, schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
