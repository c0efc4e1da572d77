"""Aggregate router for /api/v1."""

from fastapi import APIRouter

from apps.api.v1.endpoints import (
    cart,
    catalog,
    checkout,
    messages,
    orders,
    profile,
    returns,
    seller,
    wishlist,
)

api_router = APIRouter()

api_router.include_router(catalog.router)
api_router.include_router(cart.router)
api_router.include_router(checkout.router)
api_router.include_router(orders.router)
api_router.include_router(returns.router)
api_router.include_router(seller.router)
api_router.include_router(profile.router)
api_router.include_router(wishlist.router)
api_router.include_router(messages.router)
