"""Application service for saved products, sellers and searches."""

import logging

from core.application.dtos.wishlist_dto import (
    SavedProductDTO,
    SavedSearchDTO,
    SavedSellerDTO,
    SaveSearchRequest,
    ToggleResultDTO,
    WishlistDTO,
)
from core.domain.entities.wishlist import SavedProduct, SavedSearch, SavedSeller
from core.domain.exceptions import NotFoundError

from .base import ApplicationService
from .converters import product_to_dto, profile_to_dto


logger = logging.getLogger(__name__)

WISHLIST_KINDS = ("product", "seller", "search")


class WishlistService(ApplicationService):

    async def toggle_product(self, user_id: str, product_id: str) -> ToggleResultDTO:
        uow = self._uow()
        async with uow:
            existing = await uow.wishlist.find_saved_product(user_id, product_id)
            if existing:
                await uow.wishlist.remove("product", existing.id, user_id)
                await uow.commit()
                return ToggleResultDTO(saved=False)

            if await uow.products.get(product_id) is None:
                raise NotFoundError("product", product_id)
            entry = SavedProduct(user_id=user_id, product_id=product_id)
            await uow.wishlist.add(entry)
            await uow.commit()
            return ToggleResultDTO(saved=True, id=entry.id)

    async def toggle_seller(self, user_id: str, seller_id: str) -> ToggleResultDTO:
        uow = self._uow()
        async with uow:
            existing = await uow.wishlist.find_saved_seller(user_id, seller_id)
            if existing:
                await uow.wishlist.remove("seller", existing.id, user_id)
                await uow.commit()
                return ToggleResultDTO(saved=False)

            if await uow.profiles.get(seller_id) is None:
                raise NotFoundError("profile", seller_id)
            entry = SavedSeller(user_id=user_id, seller_id=seller_id)
            await uow.wishlist.add(entry)
            await uow.commit()
            return ToggleResultDTO(saved=True, id=entry.id)

    async def get_wishlist(self, user_id: str) -> WishlistDTO:
        """Saved products (with listing), sellers (with profile) and searches."""
        uow = self._uow()
        async with uow:
            saved_products = await uow.wishlist.list_saved_products(user_id)
            saved_sellers = await uow.wishlist.list_saved_sellers(user_id)
            searches = await uow.wishlist.list_saved_searches(user_id)

            products = await uow.products.get_many([s.product_id for s in saved_products])
            profiles = await uow.profiles.get_many(
                {s.seller_id for s in saved_sellers} | {p.seller_id for p in products.values()}
            )

        return WishlistDTO(
            products=[
                SavedProductDTO(
                    id=s.id,
                    product=(
                        product_to_dto(products[s.product_id], seller=profiles.get(products[s.product_id].seller_id))
                        if s.product_id in products else None
                    ),
                    created_at=s.created_at,
                )
                for s in saved_products
            ],
            sellers=[
                SavedSellerDTO(
                    id=s.id,
                    seller=profile_to_dto(profiles[s.seller_id]) if s.seller_id in profiles else None,
                    created_at=s.created_at,
                )
                for s in saved_sellers
            ],
            searches=[_search_to_dto(s) for s in searches],
        )

    async def save_search(self, user_id: str, request: SaveSearchRequest) -> SavedSearchDTO:
        search = SavedSearch.from_browse(user_id, request.query, request.category, request.organic_only)
        uow = self._uow()
        async with uow:
            await uow.wishlist.add(search)
            await uow.commit()
        logger.info(f"User {user_id} saved search '{search.query}'")
        return _search_to_dto(search)

    async def remove(self, user_id: str, kind: str, entry_id: str) -> None:
        """Delete a saved product, seller or search by its entry id."""
        if kind not in WISHLIST_KINDS:
            raise ValueError(f"Unknown wishlist kind: {kind}")
        uow = self._uow()
        async with uow:
            if not await uow.wishlist.remove(kind, entry_id, user_id):
                raise NotFoundError(kind, entry_id)
            await uow.commit()


def _search_to_dto(search: SavedSearch) -> SavedSearchDTO:
    return SavedSearchDTO(
        id=search.id,
        query=search.query,
        filters=dict(search.filters),
        created_at=search.created_at,
    )
