"""SQLAlchemy ORM models for saved products, sellers and searches."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, String, UniqueConstraint

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SavedProductModel(Base):
    __tablename__ = "saved_products"
    __table_args__ = (UniqueConstraint("user_id", "product_id", name="uq_saved_product"),)

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)
    product_id = Column(String(36), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)


class SavedSellerModel(Base):
    __tablename__ = "saved_sellers"
    __table_args__ = (UniqueConstraint("user_id", "seller_id", name="uq_saved_seller"),)

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)
    seller_id = Column(String(36), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)


class SavedSearchModel(Base):
    __tablename__ = "saved_searches"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)
    query = Column(String(255), nullable=False)
    filters = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
