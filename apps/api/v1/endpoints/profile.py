"""Profile and address book endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Response

from core.application.dtos.profile_dto import (
    AddressDTO,
    CreateAddressRequest,
    ProfileDTO,
    SwitchModeRequest,
    UpdateProfileRequest,
)
from core.application.services import ProfileService

from apps.api.deps import get_current_user, get_profile_service

router = APIRouter(tags=["profile"])


@router.get("/me", response_model=ProfileDTO)
async def get_me(user: ProfileDTO = Depends(get_current_user)) -> ProfileDTO:
    return user


@router.patch("/me", response_model=ProfileDTO)
async def update_me(
    request: UpdateProfileRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDTO:
    return await service.update_profile(user.id, request)


@router.post("/me/mode", response_model=ProfileDTO)
async def switch_mode(
    request: SwitchModeRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDTO:
    """Switch between buyer and seller mode."""
    return await service.switch_mode(user.id, request.mode)


@router.get("/addresses", response_model=List[AddressDTO])
async def list_addresses(
    user: ProfileDTO = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> List[AddressDTO]:
    return await service.list_addresses(user.id)


@router.post("/addresses", response_model=AddressDTO, status_code=201)
async def add_address(
    request: CreateAddressRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> AddressDTO:
    return await service.add_address(user.id, request)


@router.delete("/addresses/{address_id}", status_code=204)
async def delete_address(
    address_id: str,
    user: ProfileDTO = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> Response:
    await service.delete_address(user.id, address_id)
    return Response(status_code=204)
