from typing import Any, Generic, Iterable, Optional, Sequence, Type, TypeVar

from django.db import models

T = TypeVar('T', bound=models.Model)

# Upper bound of a BigAutoField primary key
MAX_PK = 2**63 - 1


def pk_in_range(value: Any) -> bool:
    """True when ``value`` is an int the primary key column can hold."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 < value <= MAX_PK


class GenericRepository(Generic[T]):
    """Minimal ORM-backed repository; subclasses add the queries their service needs."""

    ordering: Sequence[str] = ()

    def __init__(self, model: Type[T]):
        self.model = model

    def _queryset(self):
        qs = self.model.objects.all()
        return qs.order_by(*self.ordering) if self.ordering else qs

    def get(self, **filters) -> Optional[T]:
        return self._queryset().filter(**filters).first()

    def get_by_id(self, pk: Any) -> Optional[T]:
        # Ids the column cannot store never match a row
        if not pk_in_range(pk):
            return None
        return self.get(pk=pk)

    def list(self, **filters) -> Iterable[T]:
        return self._queryset().filter(**filters)

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def delete_where(self, **filters) -> int:
        deleted, _ = self.model.objects.filter(**filters).delete()
        return deleted
