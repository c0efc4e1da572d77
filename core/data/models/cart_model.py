"""SQLAlchemy ORM model for persisted cart lines."""

from sqlalchemy import Column, Integer, Numeric, String, Text, UniqueConstraint

from .base import Base


class CartItemModel(Base):
    """One row per (user, product); position keeps insertion order."""

    __tablename__ = "cart_items"
    __table_args__ = (UniqueConstraint("user_id", "product_id", name="uq_cart_user_product"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), nullable=False, index=True)
    product_id = Column(String(36), nullable=False)
    seller_id = Column(String(36), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    title = Column(String(255), nullable=False)
    variety = Column(String(255), nullable=True)
    price_per_unit = Column(Numeric(12, 2), nullable=False)
    unit = Column(String(20), nullable=False)
    quantity = Column(Integer, nullable=False)
    available_quantity = Column(Integer, nullable=False)
    image = Column(Text, nullable=True)
    seller_name = Column(String(255), nullable=True)
