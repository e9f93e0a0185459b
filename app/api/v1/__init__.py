# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation): 
# Describes version 1 of the CigarMap API: where each group of endpoints lives and how they are labelled in the docs.
# 🧪 Purpose (Technical Summary): 
# API v1 package with route prefixes, OpenAPI tags and version info used by the v1 router.
# 🔗 Dependencies: 
# app.shared.config.settings
# 🔄 Connected Modules / Calls From: 
# app.api.v1.router, app.main.py

from typing import Any, Dict

from app.shared.config.settings import get_settings

API_VERSION = "v1"

ROUTE_PREFIXES = {
    "onboarding": "/onboarding",
    "cities": "/cities",
    "lounges": "/lounges",
    "dashboard": "/dashboard",
    "billing": "/billing",
    "profiles": "/profiles",
    "admin": "/admin",
}

API_TAGS = [
    {"name": "Onboarding", "description": "Five-step owner onboarding wizard"},
    {"name": "Directory", "description": "Public city and lounge browsing"},
    {"name": "Dashboard", "description": "Owner lounge management"},
    {"name": "Billing", "description": "Plans and owner billing overview"},
    {"name": "Profiles", "description": "Signed-in user's profile"},
    {"name": "Admin", "description": "Back-office management and statistics"},
    {"name": "Health Check", "description": "Service health probes"},
]


def get_api_info() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "api_version": API_VERSION,
        "routes": ROUTE_PREFIXES,
    }
