# 📄 File: app/modules/onboarding/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Rules for moving through the wizard and finishing it.
# 🧪 Purpose (Technical Summary):
# Onboarding domain layer package.
# 🔗 Dependencies:
# pydantic, user_management and directory repositories
# 🔄 Connected Modules / Calls From:
# Onboarding application and presentation layers
