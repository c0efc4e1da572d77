"""Domain entity → DTO transformations shared by several services."""

from typing import Dict, Optional

from core.application.dtos.catalog_dto import CategoryDTO, ProductDTO
from core.application.dtos.order_dto import (
    DeliveryAddressDTO,
    OrderDTO,
    OrderItemDTO,
    OrderReturnRefDTO,
    PartyDTO,
)
from core.application.dtos.profile_dto import AddressDTO, ProfileDTO
from core.domain.entities.order import Order
from core.domain.entities.product import Category, Product
from core.domain.entities.profile import Address, Profile
from core.domain.enums import OrderStatus


def profile_to_dto(profile: Profile) -> ProfileDTO:
    return ProfileDTO(
        id=profile.id,
        full_name=profile.full_name,
        phone=profile.phone,
        avatar_url=profile.avatar_url,
        role=profile.role,
        bio=profile.bio,
        village=profile.village,
        district=profile.district,
        state=profile.state,
        pincode=profile.pincode,
        verified_farmer=profile.verified_farmer,
        active_mode=profile.active_mode,
        can_sell=profile.can_sell,
    )


def address_to_dto(address: Address) -> AddressDTO:
    return AddressDTO(
        id=address.id,
        label=address.label,
        full_name=address.full_name,
        phone=address.phone,
        street=address.street,
        city=address.city,
        district=address.district,
        state=address.state,
        pincode=address.pincode,
        latitude=address.latitude,
        longitude=address.longitude,
        is_default=address.is_default,
        created_at=address.created_at,
    )


def category_to_dto(category: Optional[Category]) -> Optional[CategoryDTO]:
    if category is None:
        return None
    return CategoryDTO(id=category.id, name=category.name, slug=category.slug)


def product_to_dto(
    product: Product,
    category: Optional[Category] = None,
    seller: Optional[Profile] = None,
) -> ProductDTO:
    """Transform a listing, optionally joined with its category and seller."""
    return ProductDTO(
        id=product.id,
        seller_id=product.seller_id,
        title=product.title,
        variety=product.variety,
        description=product.description,
        price_per_unit=product.price_per_unit,
        unit=product.unit.value,
        quantity_available=product.quantity_available,
        minimum_order=product.minimum_order,
        harvest_date=product.harvest_date,
        is_organic=product.is_organic,
        certification_url=product.certification_url,
        images=list(product.images),
        village=product.village,
        district=product.district,
        pincode=product.pincode,
        status=product.status.value,
        views_count=product.views_count,
        avg_rating=product.avg_rating,
        total_reviews=product.total_reviews,
        created_at=product.created_at,
        category=category_to_dto(category),
        seller_name=seller.full_name if seller else None,
        seller_district=seller.district if seller else None,
        seller_verified=seller.verified_farmer if seller else False,
    )


def _party(profile: Optional[Profile]) -> Optional[PartyDTO]:
    if profile is None:
        return None
    return PartyDTO(
        id=profile.id,
        full_name=profile.full_name,
        phone=profile.phone,
        district=profile.district,
    )


def order_to_dto(
    order: Order,
    profiles: Optional[Dict[str, Profile]] = None,
    address: Optional[Address] = None,
    returns: Optional[list] = None,
) -> OrderDTO:
    """Transform Order domain entity to OrderDTO.

    Args:
        order: Order domain entity
        profiles: Known profiles by id; used for the buyer/seller blocks
        address: Delivery address row, when loaded
        returns: ReturnRequest rows raised against the order

    Returns:
        OrderDTO instance
    """
    profiles = profiles or {}
    returns = returns or []

    items = [
        OrderItemDTO(
            id=item.id,
            product_id=item.product_id,
            title=item.title,
            image=item.product_snapshot.get("image"),
            quantity=item.quantity,
            unit=item.unit,
            price_per_unit=item.price_per_unit.amount,
            line_total=item.line_total.amount,
            product_snapshot=dict(item.product_snapshot),
        )
        for item in order.items
    ]

    delivery_address = None
    if address is not None:
        delivery_address = DeliveryAddressDTO(
            street=address.street,
            city=address.city,
            district=address.district,
            state=address.state,
            pincode=address.pincode,
            latitude=address.latitude,
            longitude=address.longitude,
        )

    return OrderDTO(
        id=order.id,
        order_number=str(order.order_number),
        status=order.status.value,
        buyer_id=order.buyer_id,
        seller_id=order.seller_id,
        subtotal=order.subtotal.amount,
        transport_fee=order.transport_fee.amount,
        platform_fee=order.platform_fee.amount,
        discount_amount=order.discount_amount.amount,
        total_amount=order.total_amount.amount,
        currency=order.total_amount.currency,
        delivery_mode=order.delivery_mode.value,
        delivery_date=order.delivery_date,
        delivery_slot=order.delivery_slot,
        payment_method=order.payment_method.value,
        payment_status=order.payment_status.value,
        notes=order.notes,
        created_at=order.created_at,
        cancelled_at=order.cancelled_at,
        items=items,
        seller=_party(profiles.get(order.seller_id)),
        buyer=_party(profiles.get(order.buyer_id)),
        delivery_address=delivery_address,
        returns=[OrderReturnRefDTO(id=r.id, status=r.status.value) for r in returns],
        timeline_index=order.timeline_index(),
        next_status=order.next_status.value if order.next_status else None,
        can_request_return=can_request_return(order, returns),
    )


def can_request_return(order: Order, returns: list) -> bool:
    """Returns are offered once per order, after delivery."""
    return order.status == OrderStatus.DELIVERED and not returns

