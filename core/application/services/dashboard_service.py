"""Application service for the seller dashboard."""

from core.application.dtos.dashboard_dto import DashboardDTO, SellerStatsDTO
from core.domain.services.seller_stats import RECENT_ORDER_COUNT, compute_seller_stats

from .base import ApplicationService
from .converters import order_to_dto


class DashboardService(ApplicationService):

    async def get_dashboard(self, seller_id: str) -> DashboardDTO:
        """Stats over all of the seller's listings and their newest orders."""
        uow = self._uow()
        async with uow:
            products = await uow.products.list_by_seller(seller_id)
            categories = await uow.categories.list_all()
            recent = await uow.orders.list_for_seller(seller_id, limit=RECENT_ORDER_COUNT)
            buyers = await uow.profiles.get_many({o.buyer_id for o in recent})

        stats = compute_seller_stats(products, {c.id: c.name for c in categories}, recent)
        return DashboardDTO(
            stats=SellerStatsDTO(
                active_listings=stats.active_listings,
                avg_rating=stats.avg_rating,
                pending_orders=stats.pending_orders,
                total_revenue=stats.revenue.amount,
                total_sales=stats.total_sales,
                category_breakdown=stats.category_breakdown,
            ),
            recent_orders=[order_to_dto(o, buyers) for o in recent],
        )
