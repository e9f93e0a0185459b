# 📄 File: app/modules/directory/presentation/api/v1/directory.py
# 🧭 Purpose (Layman Explanation):
# Public pages of the directory: the list of cities, the featured ones for the home page,
# a single city with its approved lounges (with filters), and a single lounge's details.
#
# 🧪 Purpose (Technical Summary):
# Unauthenticated FastAPI endpoints for city and lounge browsing. Query-string filters are
# parsed into a LoungeFilter; unknown filter values are rejected with a validation error.
#
# 🔗 Dependencies:
# - FastAPI router, DirectoryService, LoungeFilter, directory schemas
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /cities and /lounges)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.modules.directory.domain.services.directory_service import DirectoryService
from app.modules.directory.domain.services.lounge_filters import LoungeFilter
from app.modules.directory.presentation.api.schemas.directory_schemas import (
    CityPageResponse,
    CityResponse,
    LoungeResponse,
)
from app.modules.directory.presentation.dependencies import get_directory_service
from app.shared.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

cities_router = APIRouter()
lounges_router = APIRouter()


def build_filter(
    lounge_types: Optional[List[str]],
    amenities: Optional[List[str]],
    featured_only: bool = False,
    status: Optional[str] = None,
    search: Optional[str] = None
) -> LoungeFilter:
    try:
        return LoungeFilter.from_query(
            lounge_types=lounge_types,
            amenities=amenities,
            featured_only=featured_only,
            status=status,
            search=search,
        )
    except ValueError as e:
        raise ValidationError(f"Invalid filter: {e}", constraint="lounge_filter")


@cities_router.get(
    "",
    response_model=List[CityResponse],
    summary="List cities",
    description="All cities ordered by name",
)
async def list_cities(
    featured: bool = Query(False, description="Only featured cities"),
    service: DirectoryService = Depends(get_directory_service),
) -> List[CityResponse]:
    cities = await service.list_cities(featured_only=featured)
    return [CityResponse.model_validate(city) for city in cities]


@cities_router.get(
    "/{slug}",
    response_model=CityPageResponse,
    summary="Get city page",
    description="A city and its approved lounges, featured first",
    responses={404: {"description": "City not found"}},
)
async def get_city_page(
    slug: str,
    lounge_type: Optional[List[str]] = Query(None, description="Lounge types (any of)"),
    amenity: Optional[List[str]] = Query(None, description="Amenities (any of)"),
    featured: bool = Query(False, description="Only featured lounges"),
    service: DirectoryService = Depends(get_directory_service),
) -> CityPageResponse:
    lounge_filter = build_filter(lounge_type, amenity, featured_only=featured)
    city, lounges = await service.get_city_page(slug, lounge_filter)
    return CityPageResponse(
        city=CityResponse.model_validate(city),
        lounges=[LoungeResponse.model_validate(lounge) for lounge in lounges],
        total=len(lounges),
    )


@lounges_router.get(
    "/{lounge_id}",
    response_model=LoungeResponse,
    summary="Get lounge",
    description="Public lounge detail; only approved lounges are visible",
    responses={404: {"description": "Lounge not found"}},
)
async def get_lounge(
    lounge_id: str,
    service: DirectoryService = Depends(get_directory_service),
) -> LoungeResponse:
    return LoungeResponse.model_validate(await service.get_public_lounge(lounge_id))
