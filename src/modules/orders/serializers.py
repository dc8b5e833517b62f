"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.  Output serializers read the frozen
domain dataclasses directly.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.constants import OrderStatus

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateOrderEntrySerializer(serializers.Serializer):
    """Validates a single entry in an order creation request."""

    type = serializers.CharField(allow_blank=False, trim_whitespace=False)
    quantity = serializers.IntegerField(min_value=1)
    additional_ingredients = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
        allow_null=True,
        default=list,
    )


class CreateOrderSerializer(serializers.Serializer):
    """Validates the order creation request payload."""

    username = serializers.CharField(allow_blank=False)
    entries = CreateOrderEntrySerializer(many=True, allow_empty=False)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderCreatedSerializer(serializers.Serializer):
    order_id = serializers.CharField(read_only=True)


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices, read_only=True)


class OrderEntrySerializer(serializers.Serializer):
    """Read serializer for a line item, exposing the catalog code."""

    type = serializers.CharField(source="catalog_entry.id", read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    additional_ingredients = serializers.ListField(
        child=serializers.CharField(), read_only=True
    )


class OrderSerializer(serializers.Serializer):
    """Read serializer for order details with nested entries."""

    id = serializers.CharField(read_only=True)
    username = serializers.CharField(source="customer_name", read_only=True)
    entries = OrderEntrySerializer(source="line_items", many=True, read_only=True)
    status = serializers.ChoiceField(choices=OrderStatus.choices, read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class ErrorSerializer(serializers.Serializer):
    """Body returned for every domain failure."""

    timestamp = serializers.DateTimeField(read_only=True)
    status = serializers.IntegerField(read_only=True)
    code = serializers.CharField(read_only=True)
    message = serializers.CharField(read_only=True)
