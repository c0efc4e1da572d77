"""Application DTOs for profile, addresses and farm."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from core.domain.enums import ActiveMode, UserRole


class ProfileDTO(BaseModel):
    id: str
    full_name: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole
    bio: Optional[str] = None
    village: Optional[str] = None
    district: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    verified_farmer: bool = False
    active_mode: ActiveMode
    can_sell: bool = False

    model_config = {"frozen": True}


class UpdateProfileRequest(BaseModel):
    full_name: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[UserRole] = Field(None, description="buyer, seller or both")


class SwitchModeRequest(BaseModel):
    mode: ActiveMode


class AddressDTO(BaseModel):
    id: str
    label: str
    full_name: str
    phone: str
    street: str
    city: str
    district: Optional[str] = None
    state: Optional[str] = None
    pincode: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    is_default: bool = False
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}


class CreateAddressRequest(BaseModel):
    """Request DTO for the address book form."""

    label: str = Field(..., description="Home, Work or Other")
    custom_label: Optional[str] = Field(None, description="Required when label is Other")
    full_name: str
    phone: str
    street: str
    city: str
    state: Optional[str] = None
    pincode: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class FarmDTO(BaseModel):
    id: Optional[str] = None
    seller_id: str
    name: str = ""
    area: Optional[str] = None
    soil_type: Optional[str] = None
    description: Optional[str] = None
    crops_growing: List[str] = Field(default_factory=list)
    photos: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class UpsertFarmRequest(BaseModel):
    name: str
    area: Optional[str] = None
    soil_type: Optional[str] = None
    description: Optional[str] = None
    crops_growing: List[str] = Field(default_factory=list)
    photos: List[str] = Field(default_factory=list)
