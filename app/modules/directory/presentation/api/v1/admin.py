# 📄 File: app/modules/directory/presentation/api/v1/admin.py
# 🧭 Purpose (Layman Explanation):
# Admin tools for the directory: add, edit and remove cities and lounges, and approve or reject
# lounges submitted by owners.
#
# 🧪 Purpose (Technical Summary):
# Admin-only FastAPI endpoints for city and lounge CRUD and lounge moderation. Every mutation
# is audited by DirectoryService.
#
# 🔗 Dependencies:
# - FastAPI router, DirectoryService, admin guard dependency
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /admin)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.modules.directory.domain.services.directory_service import DirectoryService
from app.modules.directory.presentation.api.schemas.directory_schemas import (
    AdminLoungeCreateRequest,
    AdminLoungeUpdateRequest,
    CityCreateRequest,
    CityResponse,
    CityUpdateRequest,
    LoungeResponse,
    LoungeStatusRequest,
)
from app.modules.directory.presentation.api.v1.directory import build_filter
from app.modules.directory.presentation.dependencies import get_directory_service
from app.modules.user_management.presentation.dependencies import get_current_admin_user
from app.shared.core.dependencies import CurrentUser
from app.shared.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

admin_directory_router = APIRouter()


# =========================================================================
# CITIES
# =========================================================================

@admin_directory_router.get("/cities", response_model=List[CityResponse], summary="List cities")
async def admin_list_cities(
    admin: CurrentUser = Depends(get_current_admin_user),
    service: DirectoryService = Depends(get_directory_service),
) -> List[CityResponse]:
    return [CityResponse.model_validate(city) for city in await service.list_cities()]


@admin_directory_router.post(
    "/cities",
    response_model=CityResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create city",
    responses={409: {"description": "Slug already in use"}},
)
async def admin_create_city(
    payload: CityCreateRequest,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: DirectoryService = Depends(get_directory_service),
) -> CityResponse:
    city = await service.create_city(admin.user_id, payload.model_dump())
    return CityResponse.model_validate(city)


@admin_directory_router.patch("/cities/{city_id}", response_model=CityResponse, summary="Update city")
async def admin_update_city(
    city_id: str,
    payload: CityUpdateRequest,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: DirectoryService = Depends(get_directory_service),
) -> CityResponse:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("Nothing to update")
    return CityResponse.model_validate(await service.update_city(admin.user_id, city_id, changes))


@admin_directory_router.delete(
    "/cities/{city_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete city",
)
async def admin_delete_city(
    city_id: str,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: DirectoryService = Depends(get_directory_service),
) -> Response:
    await service.delete_city(admin.user_id, city_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =========================================================================
# LOUNGES
# =========================================================================

@admin_directory_router.get("/lounges", response_model=List[LoungeResponse], summary="List lounges")
async def admin_list_lounges(
    search: Optional[str] = Query(None, max_length=100),
    lounge_status: Optional[str] = Query(None, alias="status"),
    admin: CurrentUser = Depends(get_current_admin_user),
    service: DirectoryService = Depends(get_directory_service),
) -> List[LoungeResponse]:
    lounge_filter = build_filter(None, None, status=lounge_status, search=search)
    return [LoungeResponse.model_validate(lounge) for lounge in await service.list_lounges(lounge_filter)]


@admin_directory_router.get("/lounges/{lounge_id}", response_model=LoungeResponse, summary="Get lounge")
async def admin_get_lounge(
    lounge_id: str,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: DirectoryService = Depends(get_directory_service),
) -> LoungeResponse:
    return LoungeResponse.model_validate(await service.get_lounge(lounge_id))


@admin_directory_router.post(
    "/lounges",
    response_model=LoungeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create lounge",
)
async def admin_create_lounge(
    payload: AdminLoungeCreateRequest,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: DirectoryService = Depends(get_directory_service),
) -> LoungeResponse:
    lounge = await service.create_lounge(admin.user_id, payload.model_dump())
    return LoungeResponse.model_validate(lounge)


@admin_directory_router.patch("/lounges/{lounge_id}", response_model=LoungeResponse, summary="Update lounge")
async def admin_update_lounge(
    lounge_id: str,
    payload: AdminLoungeUpdateRequest,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: DirectoryService = Depends(get_directory_service),
) -> LoungeResponse:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("Nothing to update")
    return LoungeResponse.model_validate(await service.update_lounge(admin.user_id, lounge_id, changes))


@admin_directory_router.post(
    "/lounges/{lounge_id}/status",
    response_model=LoungeResponse,
    summary="Moderate lounge",
    description="Approve, reject, or return a lounge to pending",
)
async def admin_set_lounge_status(
    lounge_id: str,
    payload: LoungeStatusRequest,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: DirectoryService = Depends(get_directory_service),
) -> LoungeResponse:
    lounge = await service.set_lounge_status(admin.user_id, lounge_id, payload.status)
    return LoungeResponse.model_validate(lounge)


@admin_directory_router.delete(
    "/lounges/{lounge_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete lounge",
)
async def admin_delete_lounge(
    lounge_id: str,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: DirectoryService = Depends(get_directory_service),
) -> Response:
    await service.delete_lounge(admin.user_id, lounge_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
