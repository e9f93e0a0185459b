# 📄 File: app/modules/onboarding/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints the wizard screens talk to.
# 🧪 Purpose (Technical Summary):
# Onboarding presentation layer package.
# 🔗 Dependencies:
# FastAPI, onboarding services
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
