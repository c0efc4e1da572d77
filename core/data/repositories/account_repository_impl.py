"""SQLAlchemy implementations of the profile, address and farm repositories."""

from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.profile import Address, Farm, Profile
from core.domain.repositories.account_repository import (
    AddressRepository,
    FarmRepository,
    ProfileRepository,
)

from ..mappers import AddressMapper, FarmMapper, ProfileMapper
from ..models.account_model import AddressModel, FarmModel, ProfileModel


class SqlAlchemyProfileRepository(ProfileRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, user_id: str) -> Optional[Profile]:
        model = await self._session.get(ProfileModel, user_id)
        return ProfileMapper.to_domain(model) if model else None

    async def get_many(self, user_ids: Iterable[str]) -> Dict[str, Profile]:
        ids = {uid for uid in user_ids if uid}
        if not ids:
            return {}
        result = await self._session.execute(
            select(ProfileModel).where(ProfileModel.id.in_(ids))
        )
        return {m.id: ProfileMapper.to_domain(m) for m in result.scalars().all()}

    async def save(self, profile: Profile) -> None:
        existing = await self._session.get(ProfileModel, profile.id)
        if existing:
            ProfileMapper.update_persistence(profile, existing)
            self._session.add(existing)
        else:
            self._session.add(ProfileMapper.to_persistence(profile))
        await self._session.flush()


class SqlAlchemyAddressRepository(AddressRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_user(self, user_id: str) -> List[Address]:
        result = await self._session.execute(
            select(AddressModel)
            .where(AddressModel.user_id == user_id)
            .order_by(AddressModel.created_at.desc())
        )
        return [AddressMapper.to_domain(m) for m in result.scalars().all()]

    async def get(self, address_id: str) -> Optional[Address]:
        model = await self._session.get(AddressModel, address_id)
        return AddressMapper.to_domain(model) if model else None

    async def save(self, address: Address) -> None:
        self._session.add(AddressMapper.to_persistence(address))
        await self._session.flush()

    async def delete(self, address_id: str) -> None:
        await self._session.execute(delete(AddressModel).where(AddressModel.id == address_id))

    async def clear_default(self, user_id: str) -> None:
        await self._session.execute(
            update(AddressModel)
            .where(AddressModel.user_id == user_id)
            .values(is_default=False)
        )


class SqlAlchemyFarmRepository(FarmRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_for_seller(self, seller_id: str) -> Optional[Farm]:
        result = await self._session.execute(
            select(FarmModel).where(FarmModel.seller_id == seller_id)
        )
        model = result.scalar_one_or_none()
        return FarmMapper.to_domain(model) if model else None

    async def save(self, farm: Farm) -> None:
        result = await self._session.execute(
            select(FarmModel).where(FarmModel.seller_id == farm.seller_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            model = FarmModel(id=farm.id, seller_id=farm.seller_id)
        FarmMapper.update_persistence(farm, model)
        self._session.add(model)
        await self._session.flush()
