# 📄 File: app/modules/onboarding/__init__.py
# 🧭 Purpose (Layman Explanation):
# The 5-step sign-up wizard that turns a new account into a listed business.
# 🧪 Purpose (Technical Summary):
# Onboarding module package: wizard state machine, upload staging and the submission sequencer.
# 🔗 Dependencies:
# user_management, directory, shared storage
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
