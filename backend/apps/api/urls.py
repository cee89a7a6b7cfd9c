from django.urls import path
from apps.auth.views import LoginView, MeView, RegisterView
from apps.carts.views import CartItemView, CartView
from apps.catalog.views import ProductDetailView, ProductListView

urlpatterns = [
    path("users/", RegisterView.as_view(), name="api-users-register"),
    path("users/me/", MeView.as_view(), name="api-users-me"),
    path("auth/", LoginView.as_view(), name="api-auth-login"),
    path("products/", ProductListView.as_view(), name="api-products-list"),
    # Registered before the detail route; "cart" never matches <int:...>
    path("products/cart/", CartView.as_view(), name="api-cart"),
    path(
        "products/<int:product_id>/",
        ProductDetailView.as_view(),
        name="api-products-detail",
    ),
    path(
        "products/<int:product_id>/cart/",
        CartItemView.as_view(),
        name="api-cart-item",
    ),
]
