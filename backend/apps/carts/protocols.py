from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple, TYPE_CHECKING

from .models import CartEntry

if TYPE_CHECKING:
    from apps.catalog.models import Product


class CartStoreProtocol(Protocol):
    def list_by_user(self, user_id: int) -> List[CartEntry]:
        ...

    def upsert(self, user_id: int, product_id: int, quantity: int) -> Tuple[CartEntry, bool]:
        ...

    def remove(self, user_id: int, product_id: int) -> int:
        ...


class ProductLookupProtocol(Protocol):
    def get_by_id(self, pk: Any) -> Optional["Product"]:
        ...

    def in_bulk(self, ids: Iterable[int]) -> Dict[int, "Product"]:
        ...
