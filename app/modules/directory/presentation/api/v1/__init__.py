# 📄 File: app/modules/directory/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 directory, dashboard and admin lounge endpoints.
# 🧪 Purpose (Technical Summary):
# Directory v1 router package.
# 🔗 Dependencies:
# directory.py, dashboard.py, admin.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
