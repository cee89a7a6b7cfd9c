from django.db import models
from django.utils import timezone


class User(models.Model):
    # Immutable once registered; the primary key is the identity carried in tokens
    email = models.EmailField(unique=True)
    nickname = models.CharField(max_length=100, unique=True)
    password = models.CharField(max_length=255)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "users"
        ordering = ("id",)

    def __str__(self):
        return self.nickname
