"""Application tests for browsing, listings, reviews and the seller dashboard."""

from decimal import Decimal

import pytest

from core.application.dtos.catalog_dto import CreateListingRequest, UpdateListingRequest
from core.application.dtos.review_dto import CreateReviewRequest
from core.application.services import (
    CatalogService,
    DashboardService,
    OrderApplicationService,
    ReviewService,
    WishlistService,
)
from core.domain.enums import ListingStatus
from core.domain.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from core.domain.services.catalog_filters import BrowseSort

from market_helpers import deliver, place_order


class TestBrowse:

    @pytest.mark.asyncio
    async def test_only_active_listings_are_browsable(self, session_factory, seed, market):
        await seed.product(market.seller.id, title="Hidden Draft", status=ListingStatus.DRAFT)

        result = await CatalogService(session_factory).browse()

        titles = {p.title for p in result.products}
        assert titles == {"Red Tomatoes", "Alphonso Mango"}
        assert result.total == 2

    @pytest.mark.asyncio
    async def test_filters_sort_and_enrichment(self, session_factory, market):
        catalog = CatalogService(session_factory)

        by_category = await catalog.browse(category="vegetables")
        assert [p.title for p in by_category.products] == ["Red Tomatoes"]
        assert by_category.products[0].category.slug == "vegetables"
        assert by_category.products[0].seller_name == "Ravi Farms"

        by_price = await catalog.browse(sort=BrowseSort.PRICE_DESC)
        assert [p.title for p in by_price.products] == ["Alphonso Mango", "Red Tomatoes"]

        assert (await catalog.browse(search="MANGO")).total == 1
        assert (await catalog.browse(organic_only=True)).total == 0

    @pytest.mark.asyncio
    async def test_categories(self, session_factory, seed, market):
        await seed.category("Fruits", "fruits")
        slugs = {c.slug for c in await CatalogService(session_factory).list_categories()}
        assert slugs == {"vegetables", "fruits"}


class TestProductDetail:

    @pytest.mark.asyncio
    async def test_counts_views_and_saved_state(self, session_factory, market):
        catalog = CatalogService(session_factory)
        await WishlistService(session_factory).toggle_product(market.buyer.id, market.tomatoes.id)

        first = await catalog.product_detail(market.tomatoes.id, viewer_id=market.buyer.id)
        second = await catalog.product_detail(market.tomatoes.id)

        assert first.product.views_count == 1
        assert second.product.views_count == 2
        assert first.is_saved
        assert not second.is_saved
        assert first.initial_quantity == 1
        assert first.product.seller_name == "Ravi Farms"

    @pytest.mark.asyncio
    async def test_draft_visible_only_to_owner(self, session_factory, seed, market):
        draft = await seed.product(market.seller.id, title="Draft", status=ListingStatus.DRAFT)
        catalog = CatalogService(session_factory)

        owned = await catalog.product_detail(draft.id, viewer_id=market.seller.id)
        assert owned.product.status == "draft"
        with pytest.raises(NotFoundError):
            await catalog.product_detail(draft.id, viewer_id=market.buyer.id)

    @pytest.mark.asyncio
    async def test_unknown_product(self, session_factory, market):
        with pytest.raises(NotFoundError):
            await CatalogService(session_factory).product_detail("missing")


class TestSellerListings:

    @pytest.mark.asyncio
    async def test_create_uses_profile_location(self, session_factory, market):
        listing = await CatalogService(session_factory).create_listing(
            market.seller.id,
            CreateListingRequest(
                title="  Onions ",
                category_slug="vegetables",
                price_per_unit=Decimal("25"),
                quantity_available=500,
                images=["a.jpg", " "],
            ),
        )

        assert listing.title == "Onions"
        assert listing.status == "active"
        assert listing.district == "Nashik"
        assert listing.category.slug == "vegetables"
        assert listing.images == ["a.jpg"]

    @pytest.mark.asyncio
    async def test_buyers_cannot_list(self, session_factory, market):
        with pytest.raises(PermissionDeniedError):
            await CatalogService(session_factory).create_listing(
                market.buyer.id,
                CreateListingRequest(title="Eggs", price_per_unit=Decimal("6"), quantity_available=30),
            )

    @pytest.mark.asyncio
    async def test_manage_listing_lifecycle(self, session_factory, market):
        catalog = CatalogService(session_factory)
        seller_id, product_id = market.seller.id, market.tomatoes.id

        updated = await catalog.update_listing(
            seller_id, product_id, UpdateListingRequest(price_per_unit=Decimal("45"), quantity_available=0)
        )
        assert updated.price_per_unit == Decimal("45")
        assert updated.quantity_available == 0

        copy = await catalog.duplicate_listing(seller_id, product_id)
        assert copy.title == "Red Tomatoes (Copy)"
        assert copy.status == "draft"

        await catalog.change_status(seller_id, product_id, ListingStatus.SOLD_OUT)
        tabs = await catalog.seller_listings(seller_id, ListingStatus.DRAFT)
        assert tabs.counts == {"active": 0, "draft": 1, "sold_out": 1, "expired": 0}
        assert [p.id for p in tabs.listings] == [copy.id]

        await catalog.delete_listing(seller_id, copy.id)
        tabs = await catalog.seller_listings(seller_id, ListingStatus.DRAFT)
        assert tabs.listings == []

    @pytest.mark.asyncio
    async def test_cannot_manage_someone_elses_listing(self, session_factory, market):
        with pytest.raises(PermissionDeniedError):
            await CatalogService(session_factory).delete_listing(market.other_seller.id, market.tomatoes.id)


class TestReviews:

    @pytest.mark.asyncio
    async def test_buyer_reviews_after_purchase(self, session_factory, event_bus, market):
        reviews = ReviewService(session_factory)
        before = await reviews.list_reviews(market.tomatoes.id, viewer_id=market.buyer.id)
        assert not before.can_review

        order_id = await place_order(session_factory, event_bus, market)
        await OrderApplicationService(session_factory).advance(market.seller.id, order_id)

        eligible = await reviews.list_reviews(market.tomatoes.id, viewer_id=market.buyer.id)
        assert eligible.can_review

        review = await reviews.submit_review(
            market.buyer.id, market.tomatoes.id, CreateReviewRequest(rating=4, comment=" Fresh! ")
        )
        assert review.comment == "Fresh!"
        assert review.buyer_name == "Asha Buyer"

        after = await reviews.list_reviews(market.tomatoes.id, viewer_id=market.buyer.id)
        assert after.has_reviewed
        assert not after.can_review
        assert len(after.reviews) == 1

        detail = await CatalogService(session_factory).product_detail(market.tomatoes.id)
        assert detail.product.avg_rating == Decimal("4")
        assert detail.product.total_reviews == 1

        with pytest.raises(ConflictError):
            await reviews.submit_review(market.buyer.id, market.tomatoes.id, CreateReviewRequest(rating=5))

    @pytest.mark.asyncio
    async def test_pending_order_does_not_qualify(self, session_factory, event_bus, market):
        await place_order(session_factory, event_bus, market)
        with pytest.raises(PermissionDeniedError):
            await ReviewService(session_factory).submit_review(
                market.buyer.id, market.tomatoes.id, CreateReviewRequest(rating=5)
            )

    @pytest.mark.asyncio
    async def test_rating_out_of_range(self, session_factory, market):
        with pytest.raises(ValueError, match="between 1 and 5"):
            await ReviewService(session_factory).submit_review(
                market.buyer.id, market.tomatoes.id, CreateReviewRequest(rating=0)
            )


class TestDashboard:

    @pytest.mark.asyncio
    async def test_stats_reflect_orders(self, session_factory, event_bus, seed, market):
        await seed.product(market.seller.id, title="Old Stock", status=ListingStatus.EXPIRED)
        delivered_id = await place_order(session_factory, event_bus, market, quantity=5)
        await deliver(session_factory, market.seller.id, delivered_id)
        await place_order(session_factory, event_bus, market, quantity=1)

        dashboard = await DashboardService(session_factory).get_dashboard(market.seller.id)

        assert dashboard.stats.active_listings == 1
        assert dashboard.stats.pending_orders == 1
        assert dashboard.stats.total_sales == 1
        # 200 subtotal + 80 transport + 4 platform fee
        assert dashboard.stats.total_revenue == Decimal("284")
        assert dashboard.stats.category_breakdown == {"Vegetables": 1, "Other": 1}
        assert len(dashboard.recent_orders) == 2
