# 📄 File: app/modules/onboarding/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# Keeps each person's unfinished onboarding on the server.
# 🧪 Purpose (Technical Summary):
# Onboarding application layer: the session registry.
# 🔗 Dependencies:
# session_registry.py
# 🔄 Connected Modules / Calls From:
# Onboarding presentation layer, application lifespan
