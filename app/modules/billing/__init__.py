# 📄 File: app/modules/billing/__init__.py
# 🧭 Purpose (Layman Explanation):
# Plans, subscriptions and payments.
# 🧪 Purpose (Technical Summary):
# Billing module package: plan catalogue, owner billing overview, admin payments.
# 🔗 Dependencies:
# directory (lounges), user_management (activity log)
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, admin
