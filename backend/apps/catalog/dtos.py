from dataclasses import dataclass


@dataclass
class ProductDTO:
    id: int
    name: str
    thumbnail_url: str
    category: str
    price: str
    created_at: str
