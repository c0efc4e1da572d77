"""Application layer - services, interfaces, and DTOs."""

from .interfaces import (
    AuthSession,
    IAuthProvider,
    INotificationService,
    IStorageClient,
    StorageError,
)
from .services import (
    AuthService,
    CartService,
    CatalogService,
    CheckoutService,
    DashboardService,
    MessagingService,
    OrderApplicationService,
    ProfileService,
    ReturnService,
    ReviewService,
    WishlistService,
)

__all__ = [
    # Services
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
    # Interfaces
    "AuthSession",
    "IAuthProvider",
    "INotificationService",
    "IStorageClient",
    "StorageError",
]
