# 📄 File: app/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# How profiles and the activity diary are saved, and how we ask Supabase who is signed in.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package: SQLAlchemy repositories and the Supabase identity gateway.
# 🔗 Dependencies:
# SQLAlchemy, supabase, python-jose
# 🔄 Connected Modules / Calls From:
# user_management presentation dependencies, app.shared.core.dependencies
