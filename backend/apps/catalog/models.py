from django.db import models
from django.utils import timezone


class Product(models.Model):
    name = models.CharField(max_length=255)
    thumbnail_url = models.TextField(blank=True, default="")
    category = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
            models.Index(fields=["-created_at"], name="product_created_idx"),
        ]

    def __str__(self):
        return self.name
