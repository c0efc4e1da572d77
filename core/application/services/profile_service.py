"""Application service for the signed-in user's profile, addresses and farm."""

import logging
from typing import List

from core.application.dtos.profile_dto import (
    AddressDTO,
    CreateAddressRequest,
    FarmDTO,
    ProfileDTO,
    UpdateProfileRequest,
)
from core.domain.entities.profile import Address, Farm, Profile
from core.domain.enums import ActiveMode, UserRole
from core.domain.exceptions import NotFoundError, PermissionDeniedError

from .base import ApplicationService
from .converters import address_to_dto, profile_to_dto


logger = logging.getLogger(__name__)

SELF_ASSIGNABLE_ROLES = (UserRole.BUYER, UserRole.SELLER, UserRole.BOTH)


class ProfileService(ApplicationService):
    """
    Application service for account settings.

    Responsibilities:
    - Load (and on first sight create) the caller's profile
    - Contact details, role and buyer/seller mode
    - Address book and seller farm details
    """

    async def ensure_profile(self, user_id: str) -> ProfileDTO:
        """Load the profile, creating a bare buyer profile for a new user."""
        uow = self._uow()
        async with uow:
            profile = await uow.profiles.get(user_id)
            if profile is None:
                profile = Profile(id=user_id)
                await uow.profiles.save(profile)
                await uow.commit()
                logger.info(f"Created profile for new user {user_id}")
            return profile_to_dto(profile)

    async def get_profile(self, user_id: str) -> ProfileDTO:
        uow = self._uow()
        async with uow:
            profile = await uow.profiles.get(user_id)
            if profile is None:
                raise NotFoundError("profile", user_id)
            return profile_to_dto(profile)

    async def update_profile(self, user_id: str, request: UpdateProfileRequest) -> ProfileDTO:
        """Update name, phone and role.

        Raises:
            PermissionDeniedError: when asking for a role users cannot give themselves
        """
        uow = self._uow()
        async with uow:
            profile = await uow.profiles.get(user_id)
            if profile is None:
                raise NotFoundError("profile", user_id)

            profile.update_contact(request.full_name, request.phone)
            if request.role is not None and request.role != profile.role:
                if request.role not in SELF_ASSIGNABLE_ROLES:
                    raise PermissionDeniedError(f"Role '{request.role.value}' cannot be self-assigned")
                profile.role = request.role
                if not profile.can_sell and profile.active_mode == ActiveMode.SELLER:
                    profile.switch_mode(ActiveMode.BUYER)

            await uow.profiles.save(profile)
            await uow.commit()
            return profile_to_dto(profile)

    async def switch_mode(self, user_id: str, mode: ActiveMode) -> ProfileDTO:
        uow = self._uow()
        async with uow:
            profile = await uow.profiles.get(user_id)
            if profile is None:
                raise NotFoundError("profile", user_id)
            profile.switch_mode(mode)
            await uow.profiles.save(profile)
            await uow.commit()
            logger.info(f"User {user_id} switched to {mode.value} mode")
            return profile_to_dto(profile)

    # ---------------------------------------------------------------- addresses

    async def list_addresses(self, user_id: str) -> List[AddressDTO]:
        uow = self._uow()
        async with uow:
            return [address_to_dto(a) for a in await uow.addresses.list_for_user(user_id)]

    async def add_address(self, user_id: str, request: CreateAddressRequest) -> AddressDTO:
        """Save an address; a user's first address becomes the default."""
        uow = self._uow()
        async with uow:
            existing = await uow.addresses.list_for_user(user_id)
            address = Address.with_label(
                request.label,
                request.custom_label,
                user_id=user_id,
                full_name=request.full_name,
                phone=request.phone,
                street=request.street,
                city=request.city,
                state=request.state,
                pincode=request.pincode,
                latitude=request.latitude,
                longitude=request.longitude,
                is_default=not existing,
            )
            await uow.addresses.save(address)
            await uow.commit()
            return address_to_dto(address)

    async def delete_address(self, user_id: str, address_id: str) -> None:
        uow = self._uow()
        async with uow:
            address = await uow.addresses.get(address_id)
            if address is None or address.user_id != user_id:
                raise NotFoundError("address", address_id)
            await uow.addresses.delete(address_id)
            await uow.commit()

    # --------------------------------------------------------------------- farm

    async def get_farm(self, seller_id: str) -> FarmDTO:
        uow = self._uow()
        async with uow:
            farm = await uow.farms.get_for_seller(seller_id)
        if farm is None:
            return FarmDTO(seller_id=seller_id)
        return _farm_to_dto(farm)

    async def upsert_farm(self, seller_id: str, data: dict) -> FarmDTO:
        """Create or replace the seller's farm details.

        Args:
            seller_id: Seller profile id
            data: Fields of UpsertFarmRequest
        """
        uow = self._uow()
        async with uow:
            await self._require_seller(uow, seller_id)

            existing = await uow.farms.get_for_seller(seller_id)
            farm = Farm(seller_id=seller_id, **data)
            if existing is not None:
                farm.id = existing.id
            farm.validate()

            await uow.farms.save(farm)
            await uow.commit()
            return _farm_to_dto(farm)


def _farm_to_dto(farm: Farm) -> FarmDTO:
    return FarmDTO(
        id=farm.id,
        seller_id=farm.seller_id,
        name=farm.name,
        area=farm.area,
        soil_type=farm.soil_type,
        description=farm.description,
        crops_growing=list(farm.crops_growing),
        photos=list(farm.photos),
    )
