"""
Marketplace status and choice enums.

Values match the strings stored in the hosted tables.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle status."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    SHIPPED = "shipped"
    OUT_FOR_DELIVERY = "out_for_delivery"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class ReturnStatus(str, Enum):
    """Return request lifecycle status."""

    PENDING = "pending"
    APPROVED = "approved"
    PICKUP_SCHEDULED = "pickup_scheduled"
    REFUNDED = "refunded"
    REJECTED = "rejected"


class ReturnReason(str, Enum):
    QUALITY_ISSUE = "quality_issue"
    WRONG_ITEM = "wrong_item"
    LESS_QUANTITY = "less_quantity"
    CHANGED_MIND = "changed_mind"


class RefundMethod(str, Enum):
    ORIGINAL_PAYMENT = "original_payment"
    WALLET = "wallet"


class DeliveryMode(str, Enum):
    SELLER_DELIVERS = "seller_delivers"
    BUYER_PICKUP = "buyer_pickup"


class PaymentMethod(str, Enum):
    UPI = "upi"
    CARD = "card"
    COD = "cod"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class ListingStatus(str, Enum):
    """Product listing status (seller listing tabs)."""

    ACTIVE = "active"
    DRAFT = "draft"
    SOLD_OUT = "sold_out"
    EXPIRED = "expired"


class ProduceUnit(str, Enum):
    KG = "kg"
    QUINTAL = "quintal"
    TON = "ton"
    DOZEN = "dozen"
    LITRE = "litre"
    PIECE = "piece"


class UserRole(str, Enum):
    BUYER = "buyer"
    SELLER = "seller"
    BOTH = "both"
    ADMIN = "admin"


class ActiveMode(str, Enum):
    BUYER = "buyer"
    SELLER = "seller"


class MessageType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
