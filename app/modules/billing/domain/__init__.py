# 📄 File: app/modules/billing/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Business rules about plans and payments.
# 🧪 Purpose (Technical Summary):
# Billing domain layer package.
# 🔗 Dependencies:
# pydantic, domain repositories
# 🔄 Connected Modules / Calls From:
# Billing infrastructure and presentation layers
