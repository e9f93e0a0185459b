# 📄 File: app/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the version 1 profile and admin user endpoints.
#
# 🧪 Purpose (Technical Summary):
# v1 router package for user management.
#
# 🔗 Dependencies:
# - profiles, users
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router

from app.modules.user_management.presentation.api.v1.profiles import profiles_router
from app.modules.user_management.presentation.api.v1.users import admin_users_router

__all__ = ["profiles_router", "admin_users_router"]
