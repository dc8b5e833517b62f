"""Order URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.orders.views import CustomerOrderViewSet, ManagerOrderViewSet

router = DefaultRouter(trailing_slash=True)
router.register("customer/orders", CustomerOrderViewSet, basename="customer-order")
router.register("manage/orders", ManagerOrderViewSet, basename="manage-order")

urlpatterns = router.urls
