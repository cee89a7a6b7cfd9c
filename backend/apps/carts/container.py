from __future__ import annotations

from apps.catalog.mappers import ProductMapper
from apps.catalog.repositories import ProductRepository

from .mappers import CartItemMapper, CartMapper
from .repositories import CartEntryRepository
from .services import CartService


def build_cart_service() -> CartService:
    item_mapper = CartItemMapper(ProductMapper())
    return CartService(
        entries=CartEntryRepository(),
        products=ProductRepository(),
        cart_mapper=CartMapper(item_mapper),
    )
