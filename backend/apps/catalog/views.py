from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.exceptions import ProductNotFoundError
from apps.api.schemas import ErrorResponseSerializer
from apps.api.views import ProtectedAPIView
from apps.common import get_logger
from .container import build_product_service
from .serializers import (
    ProductDetailResponseSerializer,
    ProductListQuerySerializer,
    ProductListResponseSerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(ProtectedAPIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description="Newest first. Cached results may be served.",
        parameters=[
            OpenApiParameter(
                name="category",
                description="Filter by category name",
                required=False,
                type=str,
            )
        ],
        responses={
            200: ProductListResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        query = ProductListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        category = query.validated_data.get("category") or None
        self.log.debug("Handling product list request", category=category)
        products = self.service.list_products(category)
        return Response(ProductListResponseSerializer({"products": products}).data)


@extend_schema(tags=["Catalog"])
class ProductDetailView(ProtectedAPIView):
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        summary="Get product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={
            200: ProductDetailResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: int):
        dto = self.service.get_product(product_id)
        if dto is None:
            raise ProductNotFoundError(product_id)
        return Response(ProductDetailResponseSerializer({"product": dto}).data)
