# 📄 File: app/modules/admin/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 admin dashboard endpoints.
# 🧪 Purpose (Technical Summary):
# Admin v1 router package.
# 🔗 Dependencies:
# admin.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
