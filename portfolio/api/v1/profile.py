# portfolio/api/v1/profile.py
from fastapi import APIRouter, Depends, status

from portfolio.api.response import success_response
from portfolio.middleware.auth import get_current_user
from portfolio.models import ProfileRequest
from portfolio.services import ProfileService, get_profile_service

router = APIRouter()


@router.get("")
async def get_profile(service: ProfileService = Depends(get_profile_service)):
    """Return the site profile (the first profile row)."""
    profile = await service.get_profile()
    return success_response("Profile retrieved successfully", profile)


@router.get("/{profile_id}")
async def get_profile_by_id(profile_id: int, service: ProfileService = Depends(get_profile_service)):
    profile = await service.get_by_id(profile_id)
    return success_response("Profile retrieved successfully", profile)


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(get_current_user)])
async def create_profile(payload: ProfileRequest, service: ProfileService = Depends(get_profile_service)):
    profile = await service.create(payload)
    return success_response("Profile created successfully", profile, status.HTTP_201_CREATED)


@router.put("/{profile_id}", dependencies=[Depends(get_current_user)])
async def update_profile(
    profile_id: int,
    payload: ProfileRequest,
    service: ProfileService = Depends(get_profile_service)
):
    profile = await service.update(profile_id, payload)
    return success_response("Profile updated successfully", profile)
