# 📄 File: app/modules/admin/__init__.py
# 🧭 Purpose (Layman Explanation):
# The admin home screen: site-wide numbers and the latest activity.
# 🧪 Purpose (Technical Summary):
# Admin module package: statistics aggregation and the activity feed.
# 🔗 Dependencies:
# directory, billing and user_management repositories
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
