"""Domain enums."""

from .statuses import (
    ActiveMode,
    DeliveryMode,
    ListingStatus,
    MessageType,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    ProduceUnit,
    RefundMethod,
    ReturnReason,
    ReturnStatus,
    UserRole,
)

__all__ = [
    "ActiveMode",
    "DeliveryMode",
    "ListingStatus",
    "MessageType",
    "OrderStatus",
    "PaymentMethod",
    "PaymentStatus",
    "ProduceUnit",
    "RefundMethod",
    "ReturnReason",
    "ReturnStatus",
    "UserRole",
]
