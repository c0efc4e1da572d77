"""Application services."""
from .auth_service import AuthService
from .cart_service import CartService
from .catalog_service import CatalogService
from .checkout_service import CheckoutService
from .dashboard_service import DashboardService
from .messaging_service import MessagingService
from .order_service import OrderApplicationService
from .profile_service import ProfileService
from .return_service import ReturnService
from .review_service import ReviewService
from .wishlist_service import WishlistService

__all__ = [
    "AuthService",
    "CartService",
    "CatalogService",
    "CheckoutService",
    "DashboardService",
    "MessagingService",
    "OrderApplicationService",
    "ProfileService",
    "ReturnService",
    "ReviewService",
    "WishlistService",
]
