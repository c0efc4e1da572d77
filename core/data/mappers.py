"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal
from typing import Optional

from core.domain.entities.cart import CartItem
from core.domain.entities.conversation import Conversation, Message, MessageReaction
from core.domain.entities.order import Order, OrderItem
from core.domain.entities.product import Category, Product
from core.domain.entities.profile import Address, Farm, Profile
from core.domain.entities.return_request import ReturnItem, ReturnPhoto, ReturnRequest
from core.domain.entities.review import Review
from core.domain.enums import (
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
from core.domain.value_objects import Money, OrderNumber

from .models import (
    AddressModel,
    CartItemModel,
    CategoryModel,
    ConversationModel,
    FarmModel,
    MessageModel,
    MessageReactionModel,
    OrderItemModel,
    OrderModel,
    ProductModel,
    ProfileModel,
    ReturnItemModel,
    ReturnModel,
    ReturnPhotoModel,
    ReviewModel,
)


def _money(value, currency: str = "INR") -> Money:
    return Money(amount=Decimal(str(value if value is not None else 0)), currency=currency or "INR")


def _decimal(value) -> Optional[Decimal]:
    return Decimal(str(value)) if value is not None else None


# =============================================================================
# ORDERS
# =============================================================================

class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel, currency: str = "INR") -> OrderItem:
        return OrderItem(
            id=model.id,
            product_id=model.product_id,
            quantity=model.quantity,
            unit=model.unit,
            price_per_unit=_money(model.price_per_unit, currency),
            line_total=_money(model.line_total, currency),
            product_snapshot=dict(model.product_snapshot or {}),
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str) -> OrderItemModel:
        return OrderItemModel(
            id=entity.id,
            order_id=order_id,
            product_id=entity.product_id,
            quantity=entity.quantity,
            unit=entity.unit,
            price_per_unit=entity.price_per_unit.amount,
            line_total=entity.line_total.amount,
            product_snapshot=dict(entity.product_snapshot),
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel instance with items loaded

        Returns:
            Order domain aggregate
        """
        currency = model.currency or "INR"
        return Order(
            id=model.id,
            order_number=OrderNumber(value=model.order_number),
            buyer_id=model.buyer_id,
            seller_id=model.seller_id,
            status=OrderStatus(model.status),
            subtotal=_money(model.subtotal, currency),
            transport_fee=_money(model.transport_fee, currency),
            platform_fee=_money(model.platform_fee, currency),
            discount_amount=_money(model.discount_amount, currency),
            total_amount=_money(model.total_amount, currency),
            delivery_address_id=model.delivery_address_id,
            delivery_mode=DeliveryMode(model.delivery_mode),
            delivery_date=model.delivery_date,
            delivery_slot=model.delivery_slot,
            payment_method=PaymentMethod(model.payment_method),
            payment_status=PaymentStatus(model.payment_status),
            notes=model.notes,
            created_at=model.created_at,
            cancelled_at=model.cancelled_at,
            items=[OrderItemMapper.to_domain(item, currency) for item in model.items],
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        model = OrderModel(
            id=entity.id,
            order_number=str(entity.order_number),
            buyer_id=entity.buyer_id,
            seller_id=entity.seller_id,
            created_at=entity.created_at,
        )
        OrderMapper.update_persistence(entity, model)
        model.items = [OrderItemMapper.to_persistence(item, entity.id) for item in entity.items]
        return model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> None:
        """Copy mutable order fields onto an existing ORM model.

        Items are immutable after checkout and are left untouched.
        """
        model.status = entity.status.value
        model.subtotal = entity.subtotal.amount
        model.transport_fee = entity.transport_fee.amount
        model.platform_fee = entity.platform_fee.amount
        model.discount_amount = entity.discount_amount.amount
        model.total_amount = entity.total_amount.amount
        model.currency = entity.total_amount.currency
        model.delivery_address_id = entity.delivery_address_id
        model.delivery_mode = entity.delivery_mode.value
        model.delivery_date = entity.delivery_date
        model.delivery_slot = entity.delivery_slot
        model.payment_method = entity.payment_method.value
        model.payment_status = entity.payment_status.value
        model.notes = entity.notes
        model.cancelled_at = entity.cancelled_at


class ReturnMapper:

    @staticmethod
    def to_domain(model: ReturnModel) -> ReturnRequest:
        return ReturnRequest(
            id=model.id,
            order_id=model.order_id,
            user_id=model.user_id,
            seller_id=model.seller_id,
            reason=ReturnReason(model.reason),
            description=model.description,
            refund_method=RefundMethod(model.refund_method),
            status=ReturnStatus(model.status),
            created_at=model.created_at,
            items=[
                ReturnItem(id=i.id, order_item_id=i.order_item_id, quantity=i.quantity)
                for i in model.items
            ],
            photos=[ReturnPhoto(id=p.id, photo_url=p.photo_url) for p in model.photos],
        )

    @staticmethod
    def to_persistence(entity: ReturnRequest) -> ReturnModel:
        model = ReturnModel(
            id=entity.id,
            order_id=entity.order_id,
            user_id=entity.user_id,
            seller_id=entity.seller_id,
            reason=entity.reason.value,
            description=entity.description,
            refund_method=entity.refund_method.value,
            status=entity.status.value,
            created_at=entity.created_at,
        )
        model.items = [
            ReturnItemModel(id=i.id, return_id=entity.id, order_item_id=i.order_item_id, quantity=i.quantity)
            for i in entity.items
        ]
        model.photos = [
            ReturnPhotoModel(id=p.id, return_id=entity.id, photo_url=p.photo_url)
            for p in entity.photos
        ]
        return model

    @staticmethod
    def update_persistence(entity: ReturnRequest, model: ReturnModel) -> None:
        """Status and photos change after creation; items do not."""
        model.status = entity.status.value
        known = {p.id for p in model.photos}
        for photo in entity.photos:
            if photo.id not in known:
                model.photos.append(
                    ReturnPhotoModel(id=photo.id, return_id=entity.id, photo_url=photo.photo_url)
                )


# =============================================================================
# CATALOG
# =============================================================================

class ProductMapper:

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            seller_id=model.seller_id,
            category_id=model.category_id,
            title=model.title,
            variety=model.variety,
            description=model.description,
            price_per_unit=Decimal(str(model.price_per_unit)),
            unit=ProduceUnit(model.unit),
            quantity_available=model.quantity_available,
            minimum_order=model.minimum_order or 1,
            harvest_date=model.harvest_date,
            is_organic=bool(model.is_organic),
            certification_url=model.certification_url,
            images=list(model.images or []),
            village=model.village,
            district=model.district,
            pincode=model.pincode,
            status=ListingStatus(model.status),
            views_count=model.views_count or 0,
            avg_rating=_decimal(model.avg_rating),
            total_reviews=model.total_reviews or 0,
            created_at=model.created_at,
        )

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        model = ProductModel(id=entity.id, seller_id=entity.seller_id, created_at=entity.created_at)
        ProductMapper.update_persistence(entity, model)
        return model

    @staticmethod
    def update_persistence(entity: Product, model: ProductModel) -> None:
        model.category_id = entity.category_id
        model.title = entity.title
        model.variety = entity.variety
        model.description = entity.description
        model.price_per_unit = entity.price_per_unit
        model.unit = entity.unit.value
        model.quantity_available = entity.quantity_available
        model.minimum_order = entity.minimum_order
        model.harvest_date = entity.harvest_date
        model.is_organic = entity.is_organic
        model.certification_url = entity.certification_url
        model.images = list(entity.images)
        model.village = entity.village
        model.district = entity.district
        model.pincode = entity.pincode
        model.status = entity.status.value
        model.views_count = entity.views_count
        model.avg_rating = entity.avg_rating
        model.total_reviews = entity.total_reviews


class CategoryMapper:

    @staticmethod
    def to_domain(model: CategoryModel) -> Category:
        return Category(id=model.id, name=model.name, slug=model.slug)

    @staticmethod
    def to_persistence(entity: Category) -> CategoryModel:
        return CategoryModel(id=entity.id, name=entity.name, slug=entity.slug)


class ReviewMapper:

    @staticmethod
    def to_domain(model: ReviewModel) -> Review:
        return Review(
            id=model.id,
            product_id=model.product_id,
            buyer_id=model.buyer_id,
            seller_id=model.seller_id,
            rating=model.rating,
            comment=model.comment,
            created_at=model.created_at,
        )

    @staticmethod
    def to_persistence(entity: Review) -> ReviewModel:
        return ReviewModel(
            id=entity.id,
            product_id=entity.product_id,
            buyer_id=entity.buyer_id,
            seller_id=entity.seller_id,
            rating=entity.rating,
            comment=entity.comment,
            created_at=entity.created_at,
        )


# =============================================================================
# ACCOUNT
# =============================================================================

class ProfileMapper:

    @staticmethod
    def to_domain(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            full_name=model.full_name,
            phone=model.phone,
            avatar_url=model.avatar_url,
            role=UserRole(model.role or "buyer"),
            bio=model.bio,
            village=model.village,
            district=model.district,
            state=model.state,
            pincode=model.pincode,
            verified_farmer=bool(model.verified_farmer),
            active_mode=ActiveMode(model.active_mode or "buyer"),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_persistence(entity: Profile) -> ProfileModel:
        model = ProfileModel(id=entity.id, created_at=entity.created_at)
        ProfileMapper.update_persistence(entity, model)
        return model

    @staticmethod
    def update_persistence(entity: Profile, model: ProfileModel) -> None:
        model.full_name = entity.full_name
        model.phone = entity.phone
        model.avatar_url = entity.avatar_url
        model.role = entity.role.value
        model.bio = entity.bio
        model.village = entity.village
        model.district = entity.district
        model.state = entity.state
        model.pincode = entity.pincode
        model.verified_farmer = entity.verified_farmer
        model.active_mode = entity.active_mode.value
        model.updated_at = entity.updated_at


class AddressMapper:

    @staticmethod
    def to_domain(model: AddressModel) -> Address:
        return Address(
            id=model.id,
            user_id=model.user_id,
            label=model.label,
            full_name=model.full_name,
            phone=model.phone,
            street=model.street,
            city=model.city,
            district=model.district,
            state=model.state,
            pincode=model.pincode,
            latitude=model.latitude,
            longitude=model.longitude,
            is_default=bool(model.is_default),
            created_at=model.created_at,
        )

    @staticmethod
    def to_persistence(entity: Address) -> AddressModel:
        return AddressModel(
            id=entity.id,
            user_id=entity.user_id,
            label=entity.label,
            full_name=entity.full_name,
            phone=entity.phone,
            street=entity.street,
            city=entity.city,
            district=entity.district,
            state=entity.state,
            pincode=entity.pincode,
            latitude=entity.latitude,
            longitude=entity.longitude,
            is_default=entity.is_default,
            created_at=entity.created_at,
        )


class FarmMapper:

    @staticmethod
    def to_domain(model: FarmModel) -> Farm:
        return Farm(
            id=model.id,
            seller_id=model.seller_id,
            name=model.name,
            area=model.area,
            soil_type=model.soil_type,
            description=model.description,
            crops_growing=list(model.crops_growing or []),
            photos=list(model.photos or []),
        )

    @staticmethod
    def update_persistence(entity: Farm, model: FarmModel) -> None:
        model.name = entity.name
        model.area = entity.area
        model.soil_type = entity.soil_type
        model.description = entity.description
        model.crops_growing = list(entity.crops_growing)
        model.photos = list(entity.photos)


# =============================================================================
# CART & CHAT
# =============================================================================

class CartItemMapper:

    @staticmethod
    def to_domain(model: CartItemModel) -> CartItem:
        return CartItem(
            product_id=model.product_id,
            seller_id=model.seller_id,
            title=model.title,
            variety=model.variety,
            price_per_unit=Decimal(str(model.price_per_unit)),
            unit=model.unit,
            quantity=model.quantity,
            available_quantity=model.available_quantity,
            image=model.image,
            seller_name=model.seller_name,
        )

    @staticmethod
    def to_persistence(entity: CartItem, user_id: str, position: int) -> CartItemModel:
        return CartItemModel(
            user_id=user_id,
            product_id=entity.product_id,
            seller_id=entity.seller_id,
            position=position,
            title=entity.title,
            variety=entity.variety,
            price_per_unit=entity.price_per_unit,
            unit=entity.unit,
            quantity=entity.quantity,
            available_quantity=entity.available_quantity,
            image=entity.image,
            seller_name=entity.seller_name,
        )


class ConversationMapper:

    @staticmethod
    def to_domain(model: ConversationModel) -> Conversation:
        return Conversation(
            id=model.id,
            buyer_id=model.buyer_id,
            seller_id=model.seller_id,
            product_id=model.product_id,
            last_message_at=model.last_message_at,
            buyer_last_read_at=model.buyer_last_read_at,
            seller_last_read_at=model.seller_last_read_at,
            created_at=model.created_at,
        )

    @staticmethod
    def update_persistence(entity: Conversation, model: ConversationModel) -> None:
        model.buyer_id = entity.buyer_id
        model.seller_id = entity.seller_id
        model.product_id = entity.product_id
        model.last_message_at = entity.last_message_at
        model.buyer_last_read_at = entity.buyer_last_read_at
        model.seller_last_read_at = entity.seller_last_read_at


class MessageMapper:

    @staticmethod
    def to_domain(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            conversation_id=model.conversation_id,
            sender_id=model.sender_id,
            content=model.content,
            message_type=MessageType(model.message_type),
            metadata=dict(model.meta or {}),
            delivered_at=model.delivered_at,
            read_at=model.read_at,
            is_deleted=bool(model.is_deleted),
            created_at=model.created_at,
            reactions=[
                MessageReaction(id=r.id, message_id=r.message_id, user_id=r.user_id, reaction=r.reaction)
                for r in model.reactions
            ],
        )

    @staticmethod
    def update_persistence(entity: Message, model: MessageModel) -> None:
        model.conversation_id = entity.conversation_id
        model.sender_id = entity.sender_id
        model.content = entity.content
        model.message_type = entity.message_type.value
        model.meta = dict(entity.metadata)
        model.delivered_at = entity.delivered_at
        model.read_at = entity.read_at
        model.is_deleted = entity.is_deleted
