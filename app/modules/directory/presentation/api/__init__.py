# 📄 File: app/modules/directory/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Directory API endpoints and data formats.
# 🧪 Purpose (Technical Summary):
# Directory API package.
# 🔗 Dependencies:
# v1 routers, schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
