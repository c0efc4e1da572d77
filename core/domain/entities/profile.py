"""Account entities: profile, saved addresses and seller farm."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from ..enums import ActiveMode, UserRole
from ..exceptions import PermissionDeniedError
from ..value_objects import new_id

ADDRESS_LABELS = ("Home", "Work", "Other")

SELLER_ROLES = (UserRole.SELLER, UserRole.BOTH, UserRole.ADMIN)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Profile:
    id: str
    full_name: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.BUYER
    bio: Optional[str] = None
    village: Optional[str] = None
    district: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    verified_farmer: bool = False
    active_mode: ActiveMode = ActiveMode.BUYER
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def can_sell(self) -> bool:
        return self.role in SELLER_ROLES

    def switch_mode(self, mode: ActiveMode) -> None:
        if mode == ActiveMode.SELLER and not self.can_sell:
            raise PermissionDeniedError("Seller mode requires a seller account")
        self.active_mode = mode
        self.updated_at = _utcnow()

    def update_contact(self, full_name: Optional[str] = None, phone: Optional[str] = None) -> None:
        if full_name is not None:
            if not full_name.strip():
                raise ValueError("Name cannot be empty")
            self.full_name = full_name.strip()
        if phone is not None:
            self.phone = phone.strip() or None
        self.updated_at = _utcnow()


@dataclass
class Address:
    user_id: str
    label: str
    full_name: str
    phone: str
    street: str
    city: str
    pincode: str
    district: Optional[str] = None
    state: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    is_default: bool = False
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        missing = [
            name for name in ("full_name", "phone", "street", "city", "pincode")
            if not (getattr(self, name) or "").strip()
        ]
        if missing:
            raise ValueError(f"Missing address fields: {', '.join(missing)}")
        if not self.label or not self.label.strip():
            raise ValueError("Address label is required")
        if self.district is None:
            self.district = self.city

    @classmethod
    def with_label(cls, label: str, custom_label: Optional[str] = None, **kwargs) -> "Address":
        """Build an address from the label picker; `Other` needs a custom label."""
        if label == "Other":
            if not custom_label or not custom_label.strip():
                raise ValueError("Enter a name for this address")
            label = custom_label.strip()
        return cls(label=label, **kwargs)


@dataclass
class Farm:
    seller_id: str
    name: str = ""
    area: Optional[str] = None
    soil_type: Optional[str] = None
    description: Optional[str] = None
    crops_growing: List[str] = field(default_factory=list)
    photos: List[str] = field(default_factory=list)
    id: str = field(default_factory=new_id)

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Farm name is required")
        self.name = self.name.strip()
        self.crops_growing = unique_crops(self.crops_growing)


def unique_crops(crops: List[str]) -> List[str]:
    seen: List[str] = []
    for crop in crops or []:
        crop = crop.strip()
        if crop and crop not in seen:
            seen.append(crop)
    return seen
