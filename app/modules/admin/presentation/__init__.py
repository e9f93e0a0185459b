# 📄 File: app/modules/admin/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for the admin home screen.
# 🧪 Purpose (Technical Summary):
# Admin presentation layer package.
# 🔗 Dependencies:
# FastAPI, admin services
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
