# 📄 File: app/modules/admin/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The service that adds up admin dashboard numbers.
# 🧪 Purpose (Technical Summary):
# Admin domain services package.
# 🔗 Dependencies:
# admin_stats_service.py
# 🔄 Connected Modules / Calls From:
# Admin presentation dependencies
