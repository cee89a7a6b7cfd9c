from typing import List, Tuple

from django.db import transaction

from apps.common.repository import GenericRepository, pk_in_range
from .models import CartEntry


class CartEntryRepository(GenericRepository[CartEntry]):
    # Insertion order
    ordering = ("id",)

    def __init__(self):
        super().__init__(CartEntry)

    def list_by_user(self, user_id: int) -> List[CartEntry]:
        return list(self.list(user_id=user_id))

    def upsert(self, user_id: int, product_id: int, quantity: int) -> Tuple[CartEntry, bool]:
        """
        Insert the (user, product) row or overwrite its quantity.

        update_or_create locks an existing row and, when two inserts race, the
        unique constraint makes the loser fall back to updating the winner's row.
        """
        with transaction.atomic():
            return self.model.objects.update_or_create(
                user_id=user_id,
                product_id=product_id,
                defaults={"quantity": quantity},
            )

    def remove(self, user_id: int, product_id: int) -> int:
        if not pk_in_range(product_id):
            return 0
        return self.delete_where(user_id=user_id, product_id=product_id)
