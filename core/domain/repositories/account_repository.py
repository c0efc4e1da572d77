"""Repository interfaces for profiles, addresses and farms."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ..entities.profile import Address, Farm, Profile


class ProfileRepository(ABC):

    @abstractmethod
    async def get(self, user_id: str) -> Optional[Profile]:
        pass

    @abstractmethod
    async def get_many(self, user_ids: Iterable[str]) -> Dict[str, Profile]:
        """Profiles keyed by id; unknown ids are left out."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> None:
        pass


class AddressRepository(ABC):

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[Address]:
        """Saved addresses, newest first."""
        pass

    @abstractmethod
    async def get(self, address_id: str) -> Optional[Address]:
        pass

    @abstractmethod
    async def save(self, address: Address) -> None:
        pass

    @abstractmethod
    async def delete(self, address_id: str) -> None:
        pass

    @abstractmethod
    async def clear_default(self, user_id: str) -> None:
        """Unset is_default on every address of the user."""
        pass


class FarmRepository(ABC):

    @abstractmethod
    async def get_for_seller(self, seller_id: str) -> Optional[Farm]:
        pass

    @abstractmethod
    async def save(self, farm: Farm) -> None:
        """Upsert keyed on seller_id."""
        pass
