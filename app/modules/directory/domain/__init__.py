# 📄 File: app/modules/directory/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Business rules about cities and lounges.
# 🧪 Purpose (Technical Summary):
# Directory domain layer package: models, repositories and services.
# 🔗 Dependencies:
# pydantic, domain repositories
# 🔄 Connected Modules / Calls From:
# Directory infrastructure and presentation layers
