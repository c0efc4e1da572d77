"""Application service for product reviews."""

import logging
from typing import Optional

from core.application.dtos.review_dto import CreateReviewRequest, ReviewDTO, ReviewListDTO
from core.domain.entities.order import REVIEWABLE_STATUSES
from core.domain.entities.review import Review
from core.domain.exceptions import ConflictError, NotFoundError, PermissionDeniedError

from .base import ApplicationService


logger = logging.getLogger(__name__)


class ReviewService(ApplicationService):
    """Reviews are written by buyers who ordered the product, once each."""

    async def list_reviews(self, product_id: str, viewer_id: Optional[str] = None) -> ReviewListDTO:
        """List a product's reviews, newest first, with the viewer's eligibility."""
        uow = self._uow()
        async with uow:
            reviews = await uow.reviews.list_for_product(product_id)
            buyers = await uow.profiles.get_many({r.buyer_id for r in reviews})

            has_reviewed = False
            can_review = False
            if viewer_id:
                has_reviewed = any(r.buyer_id == viewer_id for r in reviews)
                if not has_reviewed:
                    can_review = await uow.orders.has_purchased(viewer_id, product_id, REVIEWABLE_STATUSES)

        return ReviewListDTO(
            reviews=[
                ReviewDTO(
                    id=r.id,
                    product_id=r.product_id,
                    buyer_id=r.buyer_id,
                    rating=r.rating,
                    comment=r.comment,
                    created_at=r.created_at,
                    buyer_name=buyers[r.buyer_id].full_name if r.buyer_id in buyers else None,
                    buyer_avatar=buyers[r.buyer_id].avatar_url if r.buyer_id in buyers else None,
                )
                for r in reviews
            ],
            can_review=can_review,
            has_reviewed=has_reviewed,
        )

    async def submit_review(self, buyer_id: str, product_id: str, request: CreateReviewRequest) -> ReviewDTO:
        """Add the buyer's review and refresh the product's rating.

        Raises:
            NotFoundError: unknown product
            ValueError: rating outside 1..5
            ConflictError: buyer already reviewed the product
            PermissionDeniedError: buyer has no qualifying order for the product
        """
        uow = self._uow()
        async with uow:
            product = await uow.products.get(product_id)
            if product is None:
                raise NotFoundError("product", product_id)

            review = Review(
                product_id=product.id,
                buyer_id=buyer_id,
                seller_id=product.seller_id,
                rating=request.rating,
                comment=request.comment,
            )

            if await uow.reviews.find(product.id, buyer_id):
                raise ConflictError("You have already reviewed this product")
            if not await uow.orders.has_purchased(buyer_id, product.id, REVIEWABLE_STATUSES):
                raise PermissionDeniedError("Only buyers who ordered this product can review it")

            await uow.reviews.save(review)
            product.apply_ratings(await uow.reviews.ratings_for_product(product.id))
            await uow.products.save(product)
            await uow.commit()

            logger.info(
                f"[{uow.execution_id}] Review {review.rating}* on {product.id}; "
                f"avg now {product.avg_rating} over {product.total_reviews}"
            )

            buyer = await uow.profiles.get(buyer_id)
            return ReviewDTO(
                id=review.id,
                product_id=review.product_id,
                buyer_id=review.buyer_id,
                rating=review.rating,
                comment=review.comment,
                created_at=review.created_at,
                buyer_name=buyer.full_name if buyer else None,
                buyer_avatar=buyer.avatar_url if buyer else None,
            )
