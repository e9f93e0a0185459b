# 📄 File: app/modules/onboarding/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The steps that save everything when onboarding is finished.
# 🧪 Purpose (Technical Summary):
# Onboarding domain services: submission sequencer and business persistence strategies.
# 🔗 Dependencies:
# submission_service.py, business_persistence.py
# 🔄 Connected Modules / Calls From:
# Onboarding presentation dependencies
