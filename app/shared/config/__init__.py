# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell CigarMap how to connect to its database and
# Supabase, and how the onboarding flow should behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management
# and the Supabase client manager.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - supabase.py (Supabase clients)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - All modules requiring configuration

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
