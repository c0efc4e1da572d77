"""SQLAlchemy implementation of CartRepository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.cart import Cart
from core.domain.repositories.cart_repository import CartRepository

from ..mappers import CartItemMapper
from ..models.cart_model import CartItemModel


class SqlAlchemyCartRepository(CartRepository):
    """Cart lines are rewritten as a whole on every save."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def load(self, user_id: str) -> Cart:
        result = await self._session.execute(
            select(CartItemModel)
            .where(CartItemModel.user_id == user_id)
            .order_by(CartItemModel.position, CartItemModel.id)
        )
        items = [CartItemMapper.to_domain(m) for m in result.scalars().all()]
        return Cart(user_id=user_id, items=items)

    async def save(self, cart: Cart) -> None:
        await self._session.execute(
            delete(CartItemModel).where(CartItemModel.user_id == cart.user_id)
        )
        for position, item in enumerate(cart.items):
            self._session.add(CartItemMapper.to_persistence(item, cart.user_id, position))
        await self._session.flush()
