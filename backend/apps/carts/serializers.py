from rest_framework import serializers

from apps.catalog.serializers import ProductReadSerializer
from .models import MAX_QUANTITY


class CartItemReadSerializer(serializers.Serializer):
    quantity = serializers.IntegerField()
    product = ProductReadSerializer()


class CartResponseSerializer(serializers.Serializer):
    cart = CartItemReadSerializer(many=True, source="items")


class CartItemWriteSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)
