from django.urls import path

from .views import (
    CancelOrderView,
    OrdersCollectionView,
    OrderStatusView,
    RetrieveOrderView,
    UserOrdersTotalView,
)

app_name = "orders"

urlpatterns = [
    path("", OrdersCollectionView.as_view(), name="orders-collection"),  # GET list / POST create
    path("<int:order_id>/", RetrieveOrderView.as_view(), name="orders-detail"),
    path("<int:order_id>/status/", OrderStatusView.as_view(), name="orders-status"),
    path("<int:order_id>/cancel/", CancelOrderView.as_view(), name="orders-cancel"),
    path("users/<int:user_id>/total/", UserOrdersTotalView.as_view(), name="orders-user-total"),
]
