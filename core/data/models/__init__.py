"""Database models."""

from .base import Base
from .account_model import AddressModel, FarmModel, ProfileModel
from .cart_model import CartItemModel
from .catalog_model import CategoryModel, ProductModel, ReviewModel
from .conversation_model import ConversationModel, MessageModel, MessageReactionModel
from .order_model import (
    CouponModel,
    OrderItemModel,
    OrderModel,
    ReturnItemModel,
    ReturnModel,
    ReturnPhotoModel,
)
from .wishlist_model import SavedProductModel, SavedSearchModel, SavedSellerModel

__all__ = [
    "AddressModel",
    "Base",
    "CartItemModel",
    "CategoryModel",
    "ConversationModel",
    "CouponModel",
    "FarmModel",
    "MessageModel",
    "MessageReactionModel",
    "OrderItemModel",
    "OrderModel",
    "ProductModel",
    "ProfileModel",
    "ReturnItemModel",
    "ReturnModel",
    "ReturnPhotoModel",
    "ReviewModel",
    "SavedProductModel",
    "SavedSearchModel",
    "SavedSellerModel",
]
