"""Order API views.

Exposes the ``OrderService`` via HTTP using DRF ViewSets: one for
customers (place an order, follow it) and one for the kitchen manager
(work through the queue one order at a time).
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.catalog.repositories import catalog_repository
from modules.orders.dtos import CreateOrderDTO, CreateOrderEntryDTO
from modules.orders.exceptions import (
    InvalidEntryType,
    OrderAlreadyInProgress,
    OrderAlreadyProcessed,
    OrderDomainError,
    OrderNotFound,
    OrderNotInProgress,
)
from modules.orders.repositories import order_repository
from modules.orders.serializers import (
    CreateOrderSerializer,
    ErrorSerializer,
    OrderCreatedSerializer,
    OrderSerializer,
    OrderStatusSerializer,
)
from modules.orders.services import OrderService


def _error_response(exc: OrderDomainError, http_status: int) -> Response:
    body = ErrorSerializer(
        {
            "timestamp": timezone.now(),
            "status": http_status,
            "code": exc.code,
            "message": exc.message,
        }
    )
    return Response(body.data, status=http_status)


class _OrderServiceMixin:
    """Wires the process-wide repositories into a fresh ``OrderService``."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=order_repository,
            catalog_repository=catalog_repository,
        )


class CustomerOrderViewSet(_OrderServiceMixin, ViewSet):
    """Customer-facing order operations."""

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Create a new order",
        request=CreateOrderSerializer,
        responses={201: OrderCreatedSerializer, 400: ErrorSerializer},
    )
    def create(self, request: Request) -> Response:
        """POST /api/customer/orders/"""
        create_serializer = CreateOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        dto = CreateOrderDTO(
            username=data["username"],
            entries=[
                CreateOrderEntryDTO(
                    type=entry["type"],
                    quantity=entry["quantity"],
                    additional_ingredients=entry.get("additional_ingredients") or [],
                )
                for entry in data["entries"]
            ],
        )

        try:
            order_id = self._service.create_order(dto)
        except InvalidEntryType as exc:
            return _error_response(exc, status.HTTP_400_BAD_REQUEST)

        out = OrderCreatedSerializer({"order_id": order_id})
        return Response(out.data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Get order status",
        responses={200: OrderStatusSerializer, 404: ErrorSerializer},
    )
    @action(detail=True, methods=["get"], url_path="status")
    def order_status(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/customer/orders/{pk}/status/"""
        try:
            order_status = self._service.get_status(pk)
        except OrderNotFound as exc:
            return _error_response(exc, status.HTTP_404_NOT_FOUND)
        return Response(OrderStatusSerializer({"status": order_status}).data)

    @extend_schema(
        summary="Get order details",
        responses={200: OrderSerializer, 404: ErrorSerializer},
    )
    @action(detail=True, methods=["get"])
    def details(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/customer/orders/{pk}/details/"""
        try:
            order = self._service.get_details(pk)
        except OrderNotFound as exc:
            return _error_response(exc, status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)


class ManagerOrderViewSet(_OrderServiceMixin, ViewSet):
    """Kitchen-facing queue operations."""

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Get orders to be processed",
        responses={200: OrderSerializer(many=True)},
    )
    def list(self, request: Request) -> Response:
        """GET /api/manage/orders/"""
        orders = self._service.list_pending()
        return Response(OrderSerializer(orders, many=True).data)

    @extend_schema(
        summary="Get ALL orders",
        responses={200: OrderSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path="all")
    def all_orders(self, request: Request) -> Response:
        """GET /api/manage/orders/all/"""
        orders = self._service.list_all()
        return Response(OrderSerializer(orders, many=True).data)

    @extend_schema(
        summary="Get the current order in progress",
        responses={200: OrderSerializer, 204: None},
    )
    @action(detail=False, methods=["get"])
    def current(self, request: Request) -> Response:
        """GET /api/manage/orders/current/

        Returns 204 when no order is in progress.
        """
        order = self._service.get_order_in_progress()
        if order is None:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(OrderSerializer(order).data)

    @extend_schema(
        summary="Get order details",
        responses={200: OrderSerializer, 404: ErrorSerializer},
    )
    @action(detail=True, methods=["get"])
    def details(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/manage/orders/{pk}/details/"""
        try:
            order = self._service.get_details(pk)
        except OrderNotFound as exc:
            return _error_response(exc, status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Lifecycle transitions
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Take the next order (set in progress)",
        request=None,
        responses={204: None, 400: ErrorSerializer, 404: ErrorSerializer},
    )
    @action(detail=True, methods=["put"])
    def start(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/manage/orders/{pk}/start/"""
        try:
            self._service.start_processing(pk)
        except OrderNotFound as exc:
            return _error_response(exc, status.HTTP_404_NOT_FOUND)
        except (OrderAlreadyInProgress, OrderAlreadyProcessed) as exc:
            return _error_response(exc, status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        summary="Mark the current order in progress as completed",
        request=None,
        responses={204: None, 400: ErrorSerializer, 404: ErrorSerializer},
    )
    @action(detail=True, methods=["put"])
    def completed(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/manage/orders/{pk}/completed/"""
        try:
            self._service.complete_processing(pk)
        except OrderNotFound as exc:
            return _error_response(exc, status.HTTP_404_NOT_FOUND)
        except OrderNotInProgress as exc:
            return _error_response(exc, status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)
