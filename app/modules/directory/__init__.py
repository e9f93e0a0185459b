# 📄 File: app/modules/directory/__init__.py
# 🧭 Purpose (Layman Explanation):
# The public lounge directory: cities, lounges, the owner dashboard and admin editing.
# 🧪 Purpose (Technical Summary):
# Directory module package: cities and lounges with public, owner and admin views.
# 🔗 Dependencies:
# user_management (activity log), shared database and utilities
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, onboarding, billing, admin
