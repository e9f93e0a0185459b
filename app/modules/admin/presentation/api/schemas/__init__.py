# 📄 File: app/modules/admin/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Data formats for admin dashboard responses.
# 🧪 Purpose (Technical Summary):
# Admin API schema package.
# 🔗 Dependencies:
# admin_schemas.py
# 🔄 Connected Modules / Calls From:
# Admin v1 endpoints
