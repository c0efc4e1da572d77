"""Application service for the buyer's cart."""

import logging

from core.application.dtos.cart_dto import CartDTO, CartItemDTO, SellerGroupDTO
from core.domain.entities.cart import Cart, CartItem
from core.domain.enums import ListingStatus
from core.domain.exceptions import NotFoundError
from core.domain.value_objects import Money

from .base import ApplicationService


logger = logging.getLogger(__name__)


class CartService(ApplicationService):
    """
    Application service for the cart.

    The cart is stored per user so it survives across sessions; every
    mutation returns the whole cart as the client re-renders it.
    """

    async def get_cart(self, user_id: str) -> CartDTO:
        uow = self._uow()
        async with uow:
            cart = await uow.carts.load(user_id)
            return cart_to_dto(cart)

    async def add_item(self, user_id: str, product_id: str, quantity: int = 1) -> CartDTO:
        """Add a product to the cart.

        Args:
            user_id: Buyer profile id
            product_id: Listing to add
            quantity: Quantity to add, capped at current stock

        Returns:
            CartDTO after the change

        Raises:
            NotFoundError: if the listing does not exist or is not active
            ValueError: if the listing is sold out
        """
        uow = self._uow()
        async with uow:
            product = await uow.products.get(product_id)
            if product is None or product.status != ListingStatus.ACTIVE:
                raise NotFoundError("product", product_id)

            seller = await uow.profiles.get(product.seller_id)
            cart = await uow.carts.load(user_id)
            cart.add_item(
                CartItem(
                    product_id=product.id,
                    seller_id=product.seller_id,
                    title=product.title,
                    price_per_unit=product.price_per_unit,
                    unit=product.unit.value,
                    quantity=0,
                    available_quantity=product.quantity_available,
                    variety=product.variety,
                    image=product.images[0] if product.images else None,
                    seller_name=seller.full_name if seller else None,
                ),
                quantity,
            )

            await uow.carts.save(cart)
            await uow.commit()

            logger.info(f"Cart {user_id}: added {quantity} x {product_id}")
            return cart_to_dto(cart)

    async def update_qty(self, user_id: str, product_id: str, quantity: int) -> CartDTO:
        uow = self._uow()
        async with uow:
            cart = await uow.carts.load(user_id)
            cart.update_qty(product_id, quantity)
            await uow.carts.save(cart)
            await uow.commit()
            return cart_to_dto(cart)

    async def remove_item(self, user_id: str, product_id: str) -> CartDTO:
        uow = self._uow()
        async with uow:
            cart = await uow.carts.load(user_id)
            cart.remove_item(product_id)
            await uow.carts.save(cart)
            await uow.commit()
            return cart_to_dto(cart)

    async def clear(self, user_id: str) -> CartDTO:
        uow = self._uow()
        async with uow:
            cart = await uow.carts.load(user_id)
            cart.clear()
            await uow.carts.save(cart)
            await uow.commit()
            return cart_to_dto(cart)


def _item_to_dto(item: CartItem) -> CartItemDTO:
    return CartItemDTO(
        product_id=item.product_id,
        seller_id=item.seller_id,
        title=item.title,
        variety=item.variety,
        price_per_unit=item.price_per_unit,
        unit=item.unit,
        quantity=item.quantity,
        available_quantity=item.available_quantity,
        image=item.image,
        seller_name=item.seller_name,
        line_total=item.line_total.amount,
    )


def cart_to_dto(cart: Cart) -> CartDTO:
    sellers = []
    for seller_id, items in cart.items_by_seller().items():
        subtotal = Money.zero()
        for item in items:
            subtotal = subtotal + item.line_total
        sellers.append(
            SellerGroupDTO(
                seller_id=seller_id,
                seller_name=items[0].seller_name,
                items=[_item_to_dto(item) for item in items],
                subtotal=subtotal.amount,
            )
        )

    total = cart.total_amount()
    return CartDTO(
        items=[_item_to_dto(item) for item in cart.items],
        sellers=sellers,
        total_items=cart.total_items(),
        total_amount=total.amount,
        currency=total.currency,
    )
