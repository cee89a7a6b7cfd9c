from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Product


class ProductRepositoryProtocol(Protocol):
    def get_by_id(self, pk: Any) -> Optional["Product"]: ...

    def list(self, **filters) -> Iterable["Product"]: ...

    def list_by_category(self, category: str) -> Iterable["Product"]: ...

    def in_bulk(self, ids: Iterable[int]) -> dict: ...


class CacheBackendProtocol(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None: ...
