# 📄 File: app/modules/billing/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Data formats for plans, billing and payments.
# 🧪 Purpose (Technical Summary):
# Billing API schema package.
# 🔗 Dependencies:
# billing_schemas.py
# 🔄 Connected Modules / Calls From:
# Billing v1 endpoints
