from .account_repository import AddressRepository, FarmRepository, ProfileRepository
from .cart_repository import CartRepository
from .catalog_repository import CategoryRepository, ProductRepository, ReviewRepository
from .conversation_repository import ConversationRepository
from .order_repository import CouponRepository, OrderRepository, ReturnRepository
from .wishlist_repository import WishlistRepository

__all__ = [
    "AddressRepository",
    "CartRepository",
    "CategoryRepository",
    "ConversationRepository",
    "CouponRepository",
    "FarmRepository",
    "OrderRepository",
    "ProductRepository",
    "ProfileRepository",
    "ReturnRepository",
    "ReviewRepository",
    "WishlistRepository",
]
