from typing import Dict, Iterable, List, Optional

from apps.catalog.mappers import ProductMapper
from apps.catalog.models import Product
from .dtos import CartDTO, CartItemDTO
from .models import CartEntry


class CartItemMapper:
    def __init__(self, product_mapper: Optional[ProductMapper] = None) -> None:
        self.product_mapper = product_mapper or ProductMapper()

    def to_dto(self, entry: CartEntry, product: Product) -> CartItemDTO:
        return CartItemDTO(
            quantity=entry.quantity, product=self.product_mapper.to_dto(product)
        )


class CartMapper:
    def __init__(self, item_mapper: Optional[CartItemMapper] = None) -> None:
        self.item_mapper = item_mapper or CartItemMapper()

    def to_dto(
        self,
        user_id: int,
        entries: Iterable[CartEntry],
        products_by_id: Dict[int, Product],
    ) -> CartDTO:
        items: List[CartItemDTO] = [
            self.item_mapper.to_dto(entry, products_by_id[entry.product_id])
            for entry in entries
            if entry.product_id in products_by_id
        ]
        return CartDTO(user_id=user_id, items=items)
