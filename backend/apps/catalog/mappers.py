from typing import Iterable, List

from .dtos import ProductDTO
from .models import Product


class ProductMapper:
    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        created = product.created_at
        return ProductDTO(
            id=product.id,
            name=product.name,
            thumbnail_url=product.thumbnail_url,
            category=product.category,
            price=str(product.price),
            created_at=created.isoformat() if hasattr(created, "isoformat") else str(created),
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]
