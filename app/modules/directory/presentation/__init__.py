# 📄 File: app/modules/directory/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for the directory, owner dashboard and admin editing.
# 🧪 Purpose (Technical Summary):
# Directory presentation layer package.
# 🔗 Dependencies:
# FastAPI, directory services
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
