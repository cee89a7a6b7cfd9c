from typing import Dict, Iterable

from apps.common.repository import GenericRepository
from .models import Product


class ProductRepository(GenericRepository[Product]):
    # Newest first, matching the storefront listing
    ordering = ("-created_at", "-id")

    def __init__(self):
        super().__init__(Product)

    def list_by_category(self, category: str):
        return self.list(category=category)

    def in_bulk(self, ids: Iterable[int]) -> Dict[int, Product]:
        """Map product id -> product for the given ids; unknown ids are absent."""
        return self.model.objects.in_bulk(list(ids))
