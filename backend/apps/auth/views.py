from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.schemas import EmptyResponseSerializer, ErrorResponseSerializer
from apps.api.utils import error_response, validation_error_response
from apps.api.views import ProtectedAPIView
from apps.common import get_logger
from .container import build_login_service, build_registration_service
from .serializers import (
    LoginRequestSerializer,
    LoginResponseSerializer,
    MeResponseSerializer,
    RegisterRequestSerializer,
)

logger = get_logger(__name__).bind(component="auth", layer="view")


@extend_schema(tags=["Auth"])
class RegisterView(APIView):
    service = build_registration_service()
    log = logger.bind(view="RegisterView")

    @extend_schema(
        summary="Register user",
        request=RegisterRequestSerializer,
        responses={
            201: EmptyResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = RegisterRequestSerializer(data=request.data)
        if not serializer.is_valid():
            self.log.info("Registration payload rejected", fields=sorted(serializer.errors))
            return validation_error_response()
        self.log.info(
            "Processing registration request",
            nickname=serializer.validated_data.get("nickname"),
        )
        error = self.service.register(serializer.validated_data)
        if error:
            code, message, details = error
            self.log.warning("Registration failed", code=code)
            return error_response(code, message, details)
        return Response({}, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Auth"])
class LoginView(APIView):
    service = build_login_service()
    log = logger.bind(view="LoginView")

    @extend_schema(
        summary="Login (issue bearer token)",
        request=LoginRequestSerializer,
        responses={
            200: LoginResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        if not serializer.is_valid():
            self.log.info("Login payload rejected", fields=sorted(serializer.errors))
            return validation_error_response()
        token, error = self.service.login(
            serializer.validated_data["email"], serializer.validated_data["password"]
        )
        if error:
            code, message, details = error
            return error_response(code, message, details)
        return Response(LoginResponseSerializer({"token": token}).data)


@extend_schema(
    tags=["Auth"],
    summary="Get current user",
    responses={
        200: MeResponseSerializer,
        401: OpenApiResponse(response=ErrorResponseSerializer),
    },
)
class MeView(ProtectedAPIView):
    log = logger.bind(view="MeView")

    def get(self, request):
        user = self.current_user
        self.log.debug("Returning current user profile", user_id=user.id)
        return Response(MeResponseSerializer(user).data)
