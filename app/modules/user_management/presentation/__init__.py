# 📄 File: app/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for profiles and admin user management.
# 🧪 Purpose (Technical Summary):
# Presentation layer package: routers, schemas and FastAPI dependencies.
# 🔗 Dependencies:
# FastAPI, user_management services
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
