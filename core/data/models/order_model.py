"""SQLAlchemy ORM models for the Order and ReturnRequest aggregates."""

from datetime import datetime, timezone

from sqlalchemy import (
    JSON, Boolean, Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text,
)
from sqlalchemy.orm import relationship

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(36), primary_key=True)
    order_number = Column(String(20), unique=True, nullable=False, index=True)
    buyer_id = Column(String(36), nullable=False, index=True)
    seller_id = Column(String(36), nullable=False, index=True)
    status = Column(String(30), nullable=False, default="pending", index=True)

    subtotal = Column(Numeric(12, 2), nullable=False)
    transport_fee = Column(Numeric(12, 2), nullable=False, default=0)
    platform_fee = Column(Numeric(12, 2), nullable=False, default=0)
    discount_amount = Column(Numeric(12, 2), nullable=False, default=0)
    total_amount = Column(Numeric(12, 2), nullable=False)
    currency = Column(String(3), default="INR")

    delivery_address_id = Column(String(36), nullable=True)
    delivery_mode = Column(String(30), nullable=False)
    delivery_date = Column(Date, nullable=True)
    delivery_slot = Column(String(20), nullable=True)
    payment_method = Column(String(10), nullable=False)
    payment_status = Column(String(10), nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=_utcnow, index=True)
    cancelled_at = Column(DateTime(timezone=True), nullable=True)

    items = relationship(
        "OrderItemModel", back_populates="order", cascade="all, delete-orphan"
    )


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(String(36), primary_key=True)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(String(36), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    unit = Column(String(20), nullable=False)
    price_per_unit = Column(Numeric(12, 2), nullable=False)
    line_total = Column(Numeric(12, 2), nullable=False)
    product_snapshot = Column(JSON, nullable=False, default=dict)

    order = relationship("OrderModel", back_populates="items")


class CouponModel(Base):
    __tablename__ = "coupons"

    id = Column(String(36), primary_key=True)
    code = Column(String(50), unique=True, nullable=False)
    discount_percentage = Column(Numeric(5, 2), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)


class ReturnModel(Base):
    """SQLAlchemy ORM model for returns table."""

    __tablename__ = "returns"

    id = Column(String(36), primary_key=True)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    seller_id = Column(String(36), nullable=False, index=True)
    reason = Column(String(30), nullable=False)
    description = Column(Text, nullable=True)
    refund_method = Column(String(30), nullable=False, default="original_payment")
    status = Column(String(30), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), default=_utcnow, index=True)

    items = relationship(
        "ReturnItemModel", back_populates="return_request", cascade="all, delete-orphan"
    )
    photos = relationship(
        "ReturnPhotoModel", back_populates="return_request", cascade="all, delete-orphan"
    )


class ReturnItemModel(Base):
    __tablename__ = "return_items"

    id = Column(String(36), primary_key=True)
    return_id = Column(String(36), ForeignKey("returns.id"), nullable=False, index=True)
    order_item_id = Column(String(36), nullable=False)
    quantity = Column(Integer, nullable=False)

    return_request = relationship("ReturnModel", back_populates="items")


class ReturnPhotoModel(Base):
    __tablename__ = "return_photos"

    id = Column(String(36), primary_key=True)
    return_id = Column(String(36), ForeignKey("returns.id"), nullable=False, index=True)
    photo_url = Column(Text, nullable=False)

    return_request = relationship("ReturnModel", back_populates="photos")
