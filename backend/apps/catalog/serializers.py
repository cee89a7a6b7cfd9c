from rest_framework import serializers


class ProductReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    thumbnailUrl = serializers.CharField(source="thumbnail_url", allow_blank=True)
    category = serializers.CharField()
    price = serializers.CharField()
    createdAt = serializers.CharField(source="created_at")


class ProductListResponseSerializer(serializers.Serializer):
    products = ProductReadSerializer(many=True)


class ProductDetailResponseSerializer(serializers.Serializer):
    product = ProductReadSerializer()


class ProductListQuerySerializer(serializers.Serializer):
    category = serializers.CharField(required=False, allow_blank=True)
