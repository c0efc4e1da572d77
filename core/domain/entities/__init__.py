from .cart import Cart, CartItem
from .conversation import Conversation, Message, MessageReaction
from .order import Order, OrderItem
from .product import Category, Product
from .profile import Address, Farm, Profile
from .return_request import ReturnItem, ReturnPhoto, ReturnRequest
from .review import Review
from .wishlist import SavedProduct, SavedSearch, SavedSeller

__all__ = [
    "Address",
    "Cart",
    "CartItem",
    "Category",
    "Conversation",
    "Farm",
    "Message",
    "MessageReaction",
    "Order",
    "OrderItem",
    "Product",
    "Profile",
    "ReturnItem",
    "ReturnPhoto",
    "ReturnRequest",
    "Review",
    "SavedProduct",
    "SavedSearch",
    "SavedSeller",
]
