"""SQLAlchemy ORM models for categories, listings and reviews."""

from datetime import datetime, timezone

from sqlalchemy import (
    JSON, Boolean, Column, Date, DateTime, Integer, Numeric, String, Text, UniqueConstraint,
)

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), unique=True, nullable=False)


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True)
    seller_id = Column(String(36), nullable=False, index=True)
    category_id = Column(String(36), nullable=True, index=True)
    title = Column(String(255), nullable=False)
    variety = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    price_per_unit = Column(Numeric(12, 2), nullable=False)
    unit = Column(String(20), nullable=False)
    quantity_available = Column(Integer, nullable=False, default=0)
    minimum_order = Column(Integer, nullable=False, default=1)
    harvest_date = Column(Date, nullable=True)
    is_organic = Column(Boolean, nullable=False, default=False)
    certification_url = Column(Text, nullable=True)
    images = Column(JSON, nullable=False, default=list)
    village = Column(String(100), nullable=True)
    district = Column(String(100), nullable=True)
    pincode = Column(String(10), nullable=True)
    status = Column(String(20), nullable=False, default="active", index=True)
    views_count = Column(Integer, nullable=False, default=0)
    avg_rating = Column(Numeric(3, 2), nullable=True)
    total_reviews = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=_utcnow, index=True)


class ReviewModel(Base):
    __tablename__ = "reviews"
    __table_args__ = (UniqueConstraint("product_id", "buyer_id", name="uq_review_product_buyer"),)

    id = Column(String(36), primary_key=True)
    product_id = Column(String(36), nullable=False, index=True)
    buyer_id = Column(String(36), nullable=False)
    seller_id = Column(String(36), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
