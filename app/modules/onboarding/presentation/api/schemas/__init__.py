# 📄 File: app/modules/onboarding/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Data formats for wizard requests and responses.
# 🧪 Purpose (Technical Summary):
# Onboarding API schema package.
# 🔗 Dependencies:
# onboarding_schemas.py
# 🔄 Connected Modules / Calls From:
# Onboarding v1 endpoints
