# 📄 File: app/modules/directory/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The logic behind browsing, editing and approving lounges.
# 🧪 Purpose (Technical Summary):
# Directory domain services package.
# 🔗 Dependencies:
# directory_service.py, lounge_filters.py
# 🔄 Connected Modules / Calls From:
# Directory presentation dependencies
