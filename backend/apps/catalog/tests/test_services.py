import unittest
from datetime import datetime, timezone
from decimal import Decimal

from apps.catalog.services import ProductService


class FakeCache:
    def __init__(self):
        self.store = {}

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value, timeout=None):
        self.store[key] = value


class StubProduct:
    def __init__(self, product_id: int, name: str, category: str, price: str = '1000'):
        self.id = product_id
        self.name = name
        self.thumbnail_url = f'https://img.example.com/{product_id}.png'
        self.category = category
        self.price = Decimal(price)
        self.created_at = datetime(2024, 1, product_id, tzinfo=timezone.utc)


class FakeProductRepository:
    def __init__(self, products):
        self.products = list(products)
        self.list_calls = 0

    def list(self, **filters):
        self.list_calls += 1
        return sorted(self.products, key=lambda p: p.created_at, reverse=True)

    def list_by_category(self, category):
        self.list_calls += 1
        return [p for p in self.list() if p.category == category]

    def get_by_id(self, pk):
        return next((p for p in self.products if p.id == pk), None)


class ProductServiceTests(unittest.TestCase):
    def setUp(self):
        self.repo = FakeProductRepository([
            StubProduct(1, 'Americano', 'drink'),
            StubProduct(2, 'Croissant', 'food'),
            StubProduct(3, 'Latte', 'drink'),
        ])
        self.cache = FakeCache()
        self.service = ProductService(self.repo, self.cache)

    def test_list_products_newest_first(self):
        names = [p.name for p in self.service.list_products()]
        self.assertEqual(names, ['Latte', 'Croissant', 'Americano'])

    def test_list_products_by_category(self):
        names = [p.name for p in self.service.list_products('drink')]
        self.assertEqual(names, ['Latte', 'Americano'])

    def test_list_is_served_from_cache(self):
        self.service.list_products()
        calls = self.repo.list_calls
        self.service.list_products()
        self.assertEqual(self.repo.list_calls, calls)
        self.assertIn('products:list:v1:all', self.cache.store)

    def test_invalidate_cache_bumps_version(self):
        self.service.list_products()
        self.service.invalidate_cache()
        self.repo.products.append(StubProduct(4, 'Mocha', 'drink'))
        names = [p.name for p in self.service.list_products()]
        self.assertEqual(names[0], 'Mocha')
        self.assertIn('products:list:v2:all', self.cache.store)

    def test_disabled_cache_always_queries(self):
        service = ProductService(self.repo, self.cache, disable_cache=True)
        service.list_products()
        service.list_products()
        self.assertEqual(self.cache.store, {})

    def test_get_product(self):
        dto = self.service.get_product(2)
        self.assertEqual(dto.name, 'Croissant')
        self.assertEqual(dto.price, '1000')
        self.assertEqual(dto.created_at, '2024-01-02T00:00:00+00:00')
        self.assertIsNone(self.service.get_product(42))

