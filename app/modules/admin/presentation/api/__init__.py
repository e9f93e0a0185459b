# 📄 File: app/modules/admin/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Admin API endpoints and data formats.
# 🧪 Purpose (Technical Summary):
# Admin API package.
# 🔗 Dependencies:
# v1 routers, schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
