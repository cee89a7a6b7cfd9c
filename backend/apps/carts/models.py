from django.db import models
from apps.users.models import User
from apps.catalog.models import Product

# Largest value PositiveIntegerField stores on every supported backend
MAX_QUANTITY = 2147483647


class CartEntry(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="cart_entries")
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="+")
    quantity = models.PositiveIntegerField()

    class Meta:
        db_table = "cart_entries"
        ordering = ("id",)
        constraints = [
            models.UniqueConstraint(
                fields=("user", "product"), name="cart_entry_user_product_uniq"
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x product {self.product_id} for user {self.user_id}"
