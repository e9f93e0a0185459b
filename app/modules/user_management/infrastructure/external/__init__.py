# 📄 File: app/modules/user_management/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Talks to Supabase to find out who is signed in.
# 🧪 Purpose (Technical Summary):
# External service adapters: SupabaseIdentityGateway.
# 🔗 Dependencies:
# supabase, python-jose
# 🔄 Connected Modules / Calls From:
# app.shared.core.dependencies
