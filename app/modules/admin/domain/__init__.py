# 📄 File: app/modules/admin/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Business rules for the admin home screen.
# 🧪 Purpose (Technical Summary):
# Admin domain layer package.
# 🔗 Dependencies:
# admin domain services
# 🔄 Connected Modules / Calls From:
# Admin presentation layer
