from .account_repository_impl import (
    SqlAlchemyAddressRepository,
    SqlAlchemyFarmRepository,
    SqlAlchemyProfileRepository,
)
from .cart_repository_impl import SqlAlchemyCartRepository
from .catalog_repository_impl import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyReviewRepository,
)
from .conversation_repository_impl import SqlAlchemyConversationRepository
from .order_repository_impl import (
    SqlAlchemyCouponRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyReturnRepository,
)
from .wishlist_repository_impl import SqlAlchemyWishlistRepository

__all__ = [
    "SqlAlchemyAddressRepository",
    "SqlAlchemyCartRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyConversationRepository",
    "SqlAlchemyCouponRepository",
    "SqlAlchemyFarmRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyProfileRepository",
    "SqlAlchemyReturnRepository",
    "SqlAlchemyReviewRepository",
    "SqlAlchemyWishlistRepository",
]
