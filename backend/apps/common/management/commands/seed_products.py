from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.carts.models import CartEntry
from apps.catalog.container import build_product_service
from apps.catalog.models import Product

# (name, category, price, thumbnail)
PRODUCTS = [
    ("Americano", "drink", Decimal("4100"), "https://images.example.com/americano.png"),
    ("Cafe Latte", "drink", Decimal("4600"), "https://images.example.com/latte.png"),
    ("Cold Brew", "drink", Decimal("4900"), "https://images.example.com/cold-brew.png"),
    ("Grapefruit Ade", "drink", Decimal("5700"), "https://images.example.com/ade.png"),
    ("Butter Croissant", "food", Decimal("3500"), "https://images.example.com/croissant.png"),
    ("Ham Cheese Sandwich", "food", Decimal("6200"), "https://images.example.com/sandwich.png"),
    ("Tumbler 473ml", "goods", Decimal("25000"), "https://images.example.com/tumbler.png"),
]


class Command(BaseCommand):
    help = "Seed the demo product catalog."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete existing products (and cart entries) first"
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing existing products...")
            CartEntry.objects.all().delete()
            Product.objects.all().delete()

        created_count = 0
        for name, category, price, thumbnail in PRODUCTS:
            _product, created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "category": category,
                    "price": price,
                    "thumbnail_url": thumbnail,
                },
            )
            created_count += int(created)

        build_product_service().invalidate_cache()
        self.stdout.write(
            self.style.SUCCESS(f"Product seed completed ({created_count} created).")
        )
