# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation): 
# This file acts like a traffic director for all API version 1 requests, sending onboarding requests
# to the wizard, lounge requests to the directory, billing requests to billing, and so on.
# 🧪 Purpose (Technical Summary): 
# Main API v1 router aggregation that combines all module routers under their prefixes.
# 🔗 Dependencies: 
# FastAPI, app.api.v1.health, module presentation routers
# 🔄 Connected Modules / Calls From: 
# app.main.py

import logging

from fastapi import APIRouter

from app.modules.admin.presentation.api.v1.admin import admin_router
from app.modules.billing.presentation.api.v1.billing import admin_billing_router, billing_router
from app.modules.directory.presentation.api.v1.admin import admin_directory_router
from app.modules.directory.presentation.api.v1.dashboard import dashboard_router
from app.modules.directory.presentation.api.v1.directory import cities_router, lounges_router
from app.modules.onboarding.presentation.api.v1.onboarding import onboarding_router
from app.modules.user_management.presentation.api.v1.profiles import profiles_router
from app.modules.user_management.presentation.api.v1.users import admin_users_router

from . import ROUTE_PREFIXES, get_api_info
from .health import health_router

logger = logging.getLogger(__name__)

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])


@api_v1_router.get("/",
                  summary="API v1 Information",
                  description="Get API v1 version information and available route prefixes",
                  tags=["API Info"])
async def api_v1_info() -> dict:
    return get_api_info()


# =========================================================================
# MODULE ROUTER INCLUDES
# =========================================================================

api_v1_router.include_router(onboarding_router, prefix=ROUTE_PREFIXES["onboarding"], tags=["Onboarding"])
api_v1_router.include_router(cities_router, prefix=ROUTE_PREFIXES["cities"], tags=["Directory"])
api_v1_router.include_router(lounges_router, prefix=ROUTE_PREFIXES["lounges"], tags=["Directory"])
api_v1_router.include_router(dashboard_router, prefix=ROUTE_PREFIXES["dashboard"], tags=["Dashboard"])
api_v1_router.include_router(billing_router, prefix=ROUTE_PREFIXES["billing"], tags=["Billing"])
api_v1_router.include_router(profiles_router, prefix=ROUTE_PREFIXES["profiles"], tags=["Profiles"])

for admin_module_router in (admin_router, admin_directory_router, admin_users_router, admin_billing_router):
    api_v1_router.include_router(admin_module_router, prefix=ROUTE_PREFIXES["admin"], tags=["Admin"])

logger.debug(f"API v1 routes registered: {', '.join(ROUTE_PREFIXES)}")
