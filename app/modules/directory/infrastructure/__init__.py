# 📄 File: app/modules/directory/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# How cities and lounges are saved in the database.
# 🧪 Purpose (Technical Summary):
# Directory infrastructure layer package.
# 🔗 Dependencies:
# SQLAlchemy
# 🔄 Connected Modules / Calls From:
# Directory presentation dependencies
