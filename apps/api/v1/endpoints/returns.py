"""Buyer return endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from core.application.dtos.profile_dto import ProfileDTO
from core.application.dtos.return_dto import ReturnDTO
from core.application.services import ReturnService

from apps.api.deps import get_current_user, get_return_service

router = APIRouter(prefix="/returns", tags=["returns"])


@router.get("", response_model=List[ReturnDTO])
async def list_returns(
    user: ProfileDTO = Depends(get_current_user),
    service: ReturnService = Depends(get_return_service),
) -> List[ReturnDTO]:
    return await service.list_for_buyer(user.id)


@router.get("/{return_id}", response_model=ReturnDTO)
async def get_return(
    return_id: str,
    user: ProfileDTO = Depends(get_current_user),
    service: ReturnService = Depends(get_return_service),
) -> ReturnDTO:
    """Return detail for its buyer or seller, with the timeline position."""
    return await service.get_return(user.id, return_id)
