"""Application service for browsing and seller listings."""

import logging
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.catalog_dto import (
    BrowseResultDTO,
    CategoryDTO,
    CreateListingRequest,
    ProductDetailDTO,
    ProductDTO,
    SellerListingsDTO,
    UpdateListingRequest,
)
from core.data.uow import UnitOfWork
from core.domain.entities.product import Category, Product
from core.domain.enums import ListingStatus
from core.domain.event_bus import EventBus
from core.domain.exceptions import NotFoundError, PermissionDeniedError
from core.domain.services.catalog_filters import (
    BrowseSort,
    ProductCard,
    count_by_status,
    filter_cards,
    sort_cards,
)
from core.settings.modules.marketplace_settings import MarketplaceSettings

from .base import ApplicationService
from .converters import category_to_dto, product_to_dto


logger = logging.getLogger(__name__)


class CatalogService(ApplicationService):
    """
    Application service for the catalog.

    Responsibilities:
    - Browse feed with filters/sorts and seller/category enrichment
    - Product detail page (counts a view)
    - Seller listings management
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        event_bus: Optional[EventBus] = None,
        settings: Optional[MarketplaceSettings] = None,
    ) -> None:
        super().__init__(session_factory, event_bus)
        self._settings = settings or MarketplaceSettings()

    async def list_categories(self) -> List[CategoryDTO]:
        uow = self._uow()
        async with uow:
            categories = await uow.categories.list_all()
            return [category_to_dto(c) for c in categories]

    async def browse(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        organic_only: bool = False,
        sort: BrowseSort = BrowseSort.RELEVANCE,
    ) -> BrowseResultDTO:
        """Browse active listings, newest first before sorting.

        Args:
            search: Case-insensitive title substring
            category: Category slug; "all" or None disables the filter
            organic_only: Only organic listings
            sort: Sort order applied after filtering

        Returns:
            BrowseResultDTO with enriched product cards
        """
        uow = self._uow()
        async with uow:
            products = await uow.products.list_active(limit=self._settings.browse_limit)
            categories = await self._categories_by_id(uow)
            sellers = await uow.profiles.get_many({p.seller_id for p in products})

        cards = []
        for product in products:
            seller = sellers.get(product.seller_id)
            cat = categories.get(product.category_id) if product.category_id else None
            cards.append(
                ProductCard(
                    product=product,
                    seller_name=seller.full_name if seller else None,
                    seller_district=seller.district if seller else None,
                    category_slug=cat.slug if cat else None,
                    category_name=cat.name if cat else None,
                )
            )

        cards = sort_cards(filter_cards(cards, search, category, organic_only), sort)
        return BrowseResultDTO(
            products=[
                product_to_dto(
                    c.product,
                    categories.get(c.product.category_id) if c.product.category_id else None,
                    sellers.get(c.product.seller_id),
                )
                for c in cards
            ],
            total=len(cards),
        )

    async def product_detail(self, product_id: str, viewer_id: Optional[str] = None) -> ProductDetailDTO:
        """Load a listing for its detail page and count the view.

        Raises:
            NotFoundError: unknown listing, or a non-active listing viewed by someone else
        """
        uow = self._uow()
        async with uow:
            product = await uow.products.get(product_id)
            if product is None:
                raise NotFoundError("product", product_id)
            if product.status != ListingStatus.ACTIVE and product.seller_id != viewer_id:
                raise NotFoundError("product", product_id)

            await uow.products.increment_views(product.id)
            await uow.commit()
            product.views_count += 1

            seller = await uow.profiles.get(product.seller_id)
            category = None
            if product.category_id:
                category = (await self._categories_by_id(uow)).get(product.category_id)

            is_saved = False
            if viewer_id:
                is_saved = await uow.wishlist.find_saved_product(viewer_id, product.id) is not None

            return ProductDetailDTO(
                product=product_to_dto(product, category, seller),
                initial_quantity=product.minimum_order,
                is_saved=is_saved,
                seller_phone=seller.phone if seller else None,
                seller_bio=seller.bio if seller else None,
            )

    async def seller_listings(
        self,
        seller_id: str,
        status: ListingStatus = ListingStatus.ACTIVE,
    ) -> SellerListingsDTO:
        """One tab of the seller's listings plus counters for every tab."""
        uow = self._uow()
        async with uow:
            products = await uow.products.list_by_seller(seller_id)
            categories = await self._categories_by_id(uow)

        return SellerListingsDTO(
            status=status,
            counts=count_by_status(products),
            listings=[
                product_to_dto(p, categories.get(p.category_id) if p.category_id else None)
                for p in products
                if p.status == status
            ],
        )

    async def create_listing(self, seller_id: str, request: CreateListingRequest) -> ProductDTO:
        """Publish a new active listing.

        Location fields left blank are taken from the seller's profile.

        Raises:
            PermissionDeniedError: caller's role cannot sell
        """
        uow = self._uow()
        async with uow:
            seller = await self._require_seller(uow, seller_id)

            category = None
            if request.category_slug:
                category = await uow.categories.get_by_slug(request.category_slug)

            product = Product(
                seller_id=seller_id,
                title=request.title.strip(),
                category_id=category.id if category else None,
                variety=request.variety,
                description=request.description,
                price_per_unit=request.price_per_unit,
                unit=request.unit,
                quantity_available=request.quantity_available,
                minimum_order=request.minimum_order,
                harvest_date=request.harvest_date,
                is_organic=request.is_organic,
                certification_url=request.certification_url,
                images=request.images,
                village=request.village or seller.village,
                district=request.district or seller.district,
                pincode=request.pincode or seller.pincode,
                status=ListingStatus.ACTIVE,
            )
            await uow.products.save(product)
            await uow.commit()

            logger.info(f"[{uow.execution_id}] Seller {seller_id} published listing {product.id}")
            return product_to_dto(product, category, seller)

    async def update_listing(self, seller_id: str, product_id: str, request: UpdateListingRequest) -> ProductDTO:
        uow = self._uow()
        async with uow:
            product = await self._owned(uow, seller_id, product_id)
            product.update_inline(request.price_per_unit, request.quantity_available)
            await uow.products.save(product)
            await uow.commit()
            return product_to_dto(product)

    async def change_status(self, seller_id: str, product_id: str, status: ListingStatus) -> ProductDTO:
        uow = self._uow()
        async with uow:
            product = await self._owned(uow, seller_id, product_id)
            product.status = status
            await uow.products.save(product)
            await uow.commit()
            logger.info(f"[{uow.execution_id}] Listing {product_id} -> {status.value}")
            return product_to_dto(product)

    async def duplicate_listing(self, seller_id: str, product_id: str) -> ProductDTO:
        uow = self._uow()
        async with uow:
            product = await self._owned(uow, seller_id, product_id)
            copy = product.duplicate()
            await uow.products.save(copy)
            await uow.commit()
            return product_to_dto(copy)

    async def delete_listing(self, seller_id: str, product_id: str) -> None:
        uow = self._uow()
        async with uow:
            await self._owned(uow, seller_id, product_id)
            await uow.products.delete(product_id)
            await uow.commit()
            logger.info(f"[{uow.execution_id}] Listing {product_id} deleted")

    @staticmethod
    async def _owned(uow: UnitOfWork, seller_id: str, product_id: str) -> Product:
        product = await uow.products.get(product_id)
        if product is None:
            raise NotFoundError("product", product_id)
        if product.seller_id != seller_id:
            raise PermissionDeniedError("You can only manage your own listings")
        return product

    @staticmethod
    async def _categories_by_id(uow: UnitOfWork) -> Dict[str, Category]:
        return {c.id: c for c in await uow.categories.list_all()}
