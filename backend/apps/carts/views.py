from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import EmptyResponseSerializer, ErrorResponseSerializer
from apps.api.utils import validation_error_response
from apps.api.views import ProtectedAPIView
from apps.common import get_logger
from .container import build_cart_service
from .serializers import CartItemWriteSerializer, CartResponseSerializer

logger = get_logger(__name__).bind(component="carts", layer="view")


@extend_schema(tags=["Cart"])
class CartView(ProtectedAPIView):
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(
        summary="List my cart",
        responses={
            200: CartResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        cart = self.service.get_cart(self.current_user.id)
        return Response(CartResponseSerializer(cart).data)


@extend_schema(
    tags=["Cart"],
    parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
)
class CartItemView(ProtectedAPIView):
    service = build_cart_service()
    log = logger.bind(view="CartItemView")

    @extend_schema(
        summary="Put a product in my cart",
        description="Sets the quantity for the product, replacing any previous quantity.",
        request=CartItemWriteSerializer,
        responses={
            200: EmptyResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, product_id: int):
        serializer = CartItemWriteSerializer(data=request.data)
        if not serializer.is_valid():
            self.log.info("Cart item payload rejected", product_id=product_id)
            return validation_error_response()
        self.service.set_quantity(
            self.current_user.id, product_id, serializer.validated_data["quantity"]
        )
        return Response({})

    @extend_schema(
        summary="Remove a product from my cart",
        description="Succeeds whether or not the product was in the cart.",
        responses={
            200: EmptyResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, product_id: int):
        self.service.remove_item(self.current_user.id, product_id)
        return Response({})
