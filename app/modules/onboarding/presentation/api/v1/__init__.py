# 📄 File: app/modules/onboarding/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 onboarding endpoints.
# 🧪 Purpose (Technical Summary):
# Onboarding v1 router package.
# 🔗 Dependencies:
# onboarding.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
