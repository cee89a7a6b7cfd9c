from __future__ import annotations

from typing import Optional

from django.utils.translation import gettext_lazy as _

from apps.api.exceptions import ApplicationError, ProductNotFoundError
from apps.common import get_logger
from .dtos import CartDTO
from .mappers import CartMapper
from .models import MAX_QUANTITY
from .protocols import CartStoreProtocol, ProductLookupProtocol

logger = get_logger(__name__).bind(component="carts", layer="service")


class InvalidQuantityError(ApplicationError):
    """Raised when a cart quantity is not a positive integer."""

    def __init__(self, quantity):
        super().__init__("VALIDATION_ERROR", _("Quantity must be a positive integer"))
        self.quantity = quantity


class CartService:
    def __init__(
        self,
        entries: CartStoreProtocol,
        products: ProductLookupProtocol,
        cart_mapper: Optional[CartMapper] = None,
    ):
        self.entries = entries
        self.products = products
        self.cart_mapper = cart_mapper or CartMapper()
        self.logger = logger.bind(service="CartService")

    def get_cart(self, user_id: int) -> CartDTO:
        entries = self.entries.list_by_user(user_id)
        products_by_id = self.products.in_bulk({e.product_id for e in entries})
        missing = [e.product_id for e in entries if e.product_id not in products_by_id]
        if missing:
            self.logger.warning(
                "Cart references unknown products", user_id=user_id, product_ids=missing
            )
        self.logger.debug("Listing cart", user_id=user_id, items=len(entries))
        return self.cart_mapper.to_dto(user_id, entries, products_by_id)

    def set_quantity(self, user_id: int, product_id: int, quantity: int) -> bool:
        """
        Put ``quantity`` of a product in the user's cart, overwriting any
        previous quantity. Returns True when a new entry was created.
        """
        if (
            isinstance(quantity, bool)
            or not isinstance(quantity, int)
            or not 1 <= quantity <= MAX_QUANTITY
        ):
            self.logger.info(
                "Cart update rejected: invalid quantity",
                user_id=user_id,
                product_id=product_id,
                quantity=quantity,
            )
            raise InvalidQuantityError(quantity)
        if self.products.get_by_id(product_id) is None:
            self.logger.info(
                "Cart update rejected: product missing",
                user_id=user_id,
                product_id=product_id,
            )
            raise ProductNotFoundError(product_id)
        _entry, created = self.entries.upsert(user_id, product_id, quantity)
        self.logger.info(
            "Cart entry stored",
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            created=created,
        )
        return created

    def remove_item(self, user_id: int, product_id: int) -> bool:
        """Drop a product from the cart. Absent entries are not an error."""
        removed = self.entries.remove(user_id, product_id)
        self.logger.info(
            "Cart entry removed" if removed else "Cart entry already absent",
            user_id=user_id,
            product_id=product_id,
        )
        return bool(removed)
