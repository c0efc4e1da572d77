"""Application service for checkout: quotes and order placement."""

import logging
from datetime import date
from decimal import Decimal
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.checkout_dto import (
    CheckoutOptionsDTO,
    CheckoutQuoteDTO,
    NewAddressRequest,
    PlaceOrderRequest,
    PlaceOrderResponse,
)
from core.data.uow import UnitOfWork
from core.domain.entities.order import Order, OrderItem
from core.domain.entities.profile import Address
from core.domain.enums import DeliveryMode, PaymentMethod
from core.domain.event_bus import EventBus
from core.domain.exceptions import NotFoundError
from core.domain.services import checkout_pricing
from core.domain.value_objects import Money, OrderNumber
from core.settings.modules.marketplace_settings import MarketplaceSettings

from .base import ApplicationService
from .converters import address_to_dto


logger = logging.getLogger(__name__)


class CheckoutService(ApplicationService):
    """
    Application service for checkout.

    Responsibilities:
    - Price the cart (quote) with the configured fees and coupon
    - Split the cart into one order per seller
    - Persist orders, clear the cart and publish OrderPlaced events
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        event_bus: Optional[EventBus] = None,
        settings: Optional[MarketplaceSettings] = None,
    ) -> None:
        super().__init__(session_factory, event_bus)
        self._settings = settings or MarketplaceSettings()

    @property
    def _fees(self) -> Dict[DeliveryMode, Decimal]:
        return {
            DeliveryMode.SELLER_DELIVERS: self._settings.seller_delivery_fee,
            DeliveryMode.BUYER_PICKUP: self._settings.pickup_fee,
        }

    async def options(self, user_id: str, today: Optional[date] = None) -> CheckoutOptionsDTO:
        """Saved addresses (default first) and the delivery choices."""
        uow = self._uow()
        async with uow:
            addresses = await uow.addresses.list_for_user(user_id)

        addresses = sorted(addresses, key=lambda a: not a.is_default)
        return CheckoutOptionsDTO(
            addresses=[address_to_dto(a) for a in addresses],
            delivery_modes=list(DeliveryMode),
            payment_methods=list(PaymentMethod),
            delivery_dates=checkout_pricing.delivery_dates(today or date.today()),
            delivery_slots=list(checkout_pricing.DELIVERY_SLOTS),
        )

    async def quote(
        self,
        user_id: str,
        delivery_mode: DeliveryMode,
        coupon_code: Optional[str] = None,
    ) -> CheckoutQuoteDTO:
        """Price the current cart.

        Raises:
            ValueError: if a coupon code is given but not active
        """
        uow = self._uow()
        async with uow:
            cart = await uow.carts.load(user_id)
            cart.drop_unavailable()
            code, percentage = await self._coupon(uow, coupon_code)

        result = checkout_pricing.quote(
            cart,
            delivery_mode,
            coupon_percentage=percentage,
            platform_fee_rate=self._settings.platform_fee_rate,
            fees=self._fees,
        )
        return CheckoutQuoteDTO(
            subtotal=result.subtotal.amount,
            transport_fee=result.transport_fee.amount,
            platform_fee=result.platform_fee.amount,
            discount_amount=result.discount_amount.amount,
            total_amount=result.total_amount.amount,
            coupon_code=code,
            seller_count=len(cart.items_by_seller()),
            currency=self._settings.currency,
        )

    async def place_order(
        self,
        user_id: str,
        request: PlaceOrderRequest,
        today: Optional[date] = None,
    ) -> PlaceOrderResponse:
        """Place the cart as one order per seller.

        Args:
            user_id: Buyer profile id
            request: PlaceOrderRequest DTO
            today: Reference date for the delivery date check

        Returns:
            PlaceOrderResponse with the created order ids

        Raises:
            ValueError: empty cart, bad delivery choice, bad coupon or address
            NotFoundError: saved address missing or owned by someone else
        """
        self._validate_delivery_choice(request, today or date.today())

        uow = self._uow()
        async with uow:
            cart = await uow.carts.load(user_id)
            for line in cart.drop_unavailable():
                logger.warning(f"[{uow.execution_id}] Dropping out-of-stock line {line.product_id} from cart {user_id}")
            if cart.is_empty():
                raise ValueError("Your cart is empty")

            _, percentage = await self._coupon(uow, request.coupon_code)
            address = await self._resolve_address(uow, user_id, request)

            splits = checkout_pricing.split_by_seller(
                cart,
                request.delivery_mode,
                coupon_percentage=percentage,
                platform_fee_rate=self._settings.platform_fee_rate,
                fees=self._fees,
            )
            payment_status = checkout_pricing.payment_status_for(request.payment_method)

            orders = []
            for split in splits:
                order = Order.place(
                    order_number=OrderNumber.generate(),
                    buyer_id=user_id,
                    seller_id=split.seller_id,
                    subtotal=split.subtotal,
                    transport_fee=split.transport_fee,
                    platform_fee=split.platform_fee,
                    discount_amount=split.discount_amount,
                    total_amount=split.total_amount,
                    delivery_mode=request.delivery_mode,
                    payment_method=request.payment_method,
                    payment_status=payment_status,
                    delivery_address_id=address.id,
                    delivery_date=request.delivery_date,
                    delivery_slot=request.delivery_slot,
                    notes=request.notes,
                    items=[
                        OrderItem(
                            product_id=item.product_id,
                            quantity=item.quantity,
                            unit=item.unit,
                            price_per_unit=Money(amount=item.price_per_unit),
                            line_total=item.line_total,
                            product_snapshot={"title": item.title, "image": item.image},
                        )
                        for item in split.items
                    ],
                )
                await uow.orders.save(order)
                orders.append(order)

            cart.clear()
            await uow.carts.save(cart)
            await uow.commit()

            logger.info(
                f"[{uow.execution_id}] Buyer {user_id} placed {len(orders)} order(s): "
                f"{', '.join(str(o.order_number) for o in orders)}"
            )
            await self._publish(orders, uow)

        return PlaceOrderResponse(
            order_ids=[o.id for o in orders],
            order_numbers=[str(o.order_number) for o in orders],
            redirect_order_id=orders[0].id,
        )

    @staticmethod
    def _validate_delivery_choice(request: PlaceOrderRequest, today: date) -> None:
        if request.delivery_date is not None and request.delivery_date not in checkout_pricing.delivery_dates(today):
            raise ValueError("Delivery date must be tomorrow or the day after")
        if request.delivery_slot is not None and request.delivery_slot not in checkout_pricing.DELIVERY_SLOTS:
            raise ValueError(f"Unknown delivery slot: {request.delivery_slot}")

    @staticmethod
    async def _coupon(uow: UnitOfWork, coupon_code: Optional[str]):
        if not coupon_code or not coupon_code.strip():
            return None, Decimal("0")

        code = coupon_code.strip().upper()
        percentage = await uow.coupons.find_active_percentage(code)
        if percentage is None:
            raise ValueError("Invalid or expired coupon code")
        return code, percentage

    @staticmethod
    async def _resolve_address(uow: UnitOfWork, user_id: str, request: PlaceOrderRequest) -> Address:
        if request.address_id:
            address = await uow.addresses.get(request.address_id)
            if address is None or address.user_id != user_id:
                raise NotFoundError("address", request.address_id)
            return address

        if request.new_address is None:
            raise ValueError("Select a delivery address")

        address = _new_home_address(user_id, request.new_address)
        await uow.addresses.clear_default(user_id)
        await uow.addresses.save(address)
        return address


def _new_home_address(user_id: str, data: NewAddressRequest) -> Address:
    if data.latitude is None or data.longitude is None:
        raise ValueError("Drop a pin on the map for the delivery location")
    return Address(
        user_id=user_id,
        label="Home",
        full_name=data.full_name,
        phone=data.phone,
        street=data.street,
        city=data.city,
        district=data.city,
        state=data.state,
        pincode=data.pincode,
        latitude=data.latitude,
        longitude=data.longitude,
        is_default=True,
    )
