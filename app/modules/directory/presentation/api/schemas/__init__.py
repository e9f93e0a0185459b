# 📄 File: app/modules/directory/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Data formats for city and lounge requests and responses.
# 🧪 Purpose (Technical Summary):
# Directory API schema package.
# 🔗 Dependencies:
# directory_schemas.py
# 🔄 Connected Modules / Calls From:
# Directory v1 endpoints
