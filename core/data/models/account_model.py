"""SQLAlchemy ORM models for profiles, addresses and farms."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, String, Text

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProfileModel(Base):
    """One row per authenticated user; id is the auth user id."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)
    full_name = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)
    avatar_url = Column(Text, nullable=True)
    role = Column(String(10), nullable=False, default="buyer")
    bio = Column(Text, nullable=True)
    village = Column(String(100), nullable=True)
    district = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    pincode = Column(String(10), nullable=True)
    verified_farmer = Column(Boolean, nullable=False, default=False)
    active_mode = Column(String(10), nullable=False, default="buyer")
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)


class AddressModel(Base):
    __tablename__ = "addresses"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)
    label = Column(String(50), nullable=False)
    full_name = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=False)
    street = Column(Text, nullable=False)
    city = Column(String(100), nullable=False)
    district = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    pincode = Column(String(10), nullable=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)


class FarmModel(Base):
    __tablename__ = "farms"

    id = Column(String(36), primary_key=True)
    seller_id = Column(String(36), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    area = Column(String(100), nullable=True)
    soil_type = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    crops_growing = Column(JSON, nullable=False, default=list)
    photos = Column(JSON, nullable=False, default=list)
