from dataclasses import dataclass
from typing import List

from apps.catalog.dtos import ProductDTO


@dataclass
class CartItemDTO:
    quantity: int
    product: ProductDTO


@dataclass
class CartDTO:
    user_id: int
    items: List[CartItemDTO]
