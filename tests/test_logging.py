import logging
import uuid

import pytest


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_order_events_carry_correlation_id(self, api_client, caplog):
        custom_id = "order-correlation-789"
        with caplog.at_level(logging.INFO):
            api_client.post(
                "/api/customer/orders/",
                {"username": "Davide", "entries": [{"type": "MARG", "quantity": 1}]},
                format="json",
                HTTP_X_REQUEST_ID=custom_id,
            )
        messages = [r.getMessage() for r in caplog.records]
        assert any("order.created" in m and custom_id in m for m in messages)


class TestRejectedTransitionLogging:
    def test_rejected_complete_logs_warning(self, api_client, caplog):
        with caplog.at_level(logging.WARNING, logger="modules.orders.services"):
            api_client.put("/api/manage/orders/unknown-id/completed/")
        assert any(
            record.levelno == logging.WARNING
            and "order.complete_rejected" in record.getMessage()
            for record in caplog.records
        )


class TestKitchenLog:
    def test_order_lifecycle_is_logged_with_queue_depth(self, api_client, caplog):
        payload = {"username": "Davide", "entries": [{"type": "MARG", "quantity": 2}]}
        with caplog.at_level(logging.INFO, logger="modules.orders.handlers"):
            order_id = api_client.post(
                "/api/customer/orders/", payload, format="json"
            ).json()["order_id"]
            api_client.put(f"/api/manage/orders/{order_id}/start/")

        messages = [r.getMessage() for r in caplog.records]
        assert any(
            "kitchen.order_queued" in m and order_id in m and "'pending': 1" in m
            for m in messages
        )
        assert any(
            "kitchen.order_transition" in m
            and "WAITING -> IN_PROGRESS" in m
            and "'pending': 0" in m
            for m in messages
        )


@pytest.mark.unit
class TestSensitiveDataMasking:
    def test_password_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert result["header"] == "token=***MASKED***"

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "order.created", "order_id": "9e40b6ef", "customer": "Davide"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {
            "event": "order.created",
            "order_id": "9e40b6ef",
            "customer": "Davide",
        }
