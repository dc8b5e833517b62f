"""Integration tests for the kitchen manager endpoints.

Covers the queue views (pending, all, current) and the start/complete
transitions with every error code they can return.
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

CUSTOMER_URL = "/api/customer/orders/"
MANAGE_URL = "/api/manage/orders/"


@pytest.fixture()
def create_order(api_client):
    def _create(type_id: str = "MARG", username: str = "Davide") -> str:
        response = api_client.post(
            CUSTOMER_URL,
            {"username": username, "entries": [{"type": type_id, "quantity": 1}]},
            format="json",
        )
        assert response.status_code == 201
        return response.json()["order_id"]

    return _create


def _start(api_client, order_id: str):
    return api_client.put(f"{MANAGE_URL}{order_id}/start/")


def _complete(api_client, order_id: str):
    return api_client.put(f"{MANAGE_URL}{order_id}/completed/")


class TestQueueViews:
    def test_pending_lists_waiting_orders_in_creation_order(
        self, api_client, create_order
    ):
        a, b, c = create_order("MARG"), create_order("BUFA"), create_order("WURS")
        assert _start(api_client, b).status_code == 204

        response = api_client.get(MANAGE_URL)

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [a, c]

    def test_all_lists_every_order(self, api_client, create_order):
        a, b = create_order(), create_order()
        _start(api_client, a)
        _complete(api_client, a)

        response = api_client.get(f"{MANAGE_URL}all/")

        assert response.status_code == 200
        body = response.json()
        assert [o["id"] for o in body] == [a, b]
        assert [o["status"] for o in body] == ["COMPLETED", "WAITING"]

    def test_empty_store(self, api_client):
        assert api_client.get(MANAGE_URL).json() == []
        assert api_client.get(f"{MANAGE_URL}all/").json() == []

    def test_current_is_204_when_idle(self, api_client, create_order):
        create_order()
        response = api_client.get(f"{MANAGE_URL}current/")
        assert response.status_code == 204

    def test_current_returns_order_in_progress(self, api_client, create_order):
        order_id = create_order("DIAV")
        _start(api_client, order_id)

        response = api_client.get(f"{MANAGE_URL}current/")

        assert response.status_code == 200
        assert response.json()["id"] == order_id
        assert response.json()["status"] == "IN_PROGRESS"

    def test_details(self, api_client, create_order):
        order_id = create_order("BUFA")
        response = api_client.get(f"{MANAGE_URL}{order_id}/details/")
        assert response.status_code == 200
        assert response.json()["entries"][0]["type"] == "BUFA"

    def test_details_unknown_returns_404(self, api_client):
        response = api_client.get(f"{MANAGE_URL}unknown-id/details/")
        assert response.status_code == 404


class TestStart:
    def test_start_returns_204(self, api_client, create_order):
        order_id = create_order()

        response = _start(api_client, order_id)

        assert response.status_code == 204
        status = api_client.get(f"{CUSTOMER_URL}{order_id}/status/").json()
        assert status == {"status": "IN_PROGRESS"}

    def test_second_start_returns_already_in_progress(self, api_client, create_order):
        a, b = create_order(), create_order()
        _start(api_client, a)

        for order_id in (a, b, "unknown-id"):
            response = _start(api_client, order_id)
            assert response.status_code == 400
            assert response.json()["code"] == "ORDER_ALREADY_IN_PROGRESS"

    def test_start_unknown_returns_404(self, api_client):
        response = _start(api_client, "unknown-id")
        assert response.status_code == 404
        assert response.json()["code"] == "ORDER_NOT_FOUND"

    def test_start_completed_returns_already_processed(self, api_client, create_order):
        order_id = create_order()
        _start(api_client, order_id)
        _complete(api_client, order_id)

        response = _start(api_client, order_id)

        assert response.status_code == 400
        assert response.json()["code"] == "ORDER_ALREADY_PROCESSED"

    def test_get_not_allowed_on_start(self, api_client, create_order):
        order_id = create_order()
        response = api_client.get(f"{MANAGE_URL}{order_id}/start/")
        assert response.status_code == 405


class TestComplete:
    def test_complete_returns_204_and_frees_slot(self, api_client, create_order):
        order_id = create_order()
        _start(api_client, order_id)

        response = _complete(api_client, order_id)

        assert response.status_code == 204
        assert api_client.get(f"{MANAGE_URL}current/").status_code == 204

    def test_complete_with_nothing_in_progress(self, api_client):
        response = _complete(api_client, "unknown-id")
        assert response.status_code == 400
        assert response.json()["code"] == "ORDER_NOT_IN_PROGRESS"

    def test_complete_wrong_order_keeps_current(self, api_client, create_order):
        a, b = create_order(), create_order()
        _start(api_client, a)

        response = _complete(api_client, b)

        assert response.status_code == 400
        assert response.json()["code"] == "ORDER_NOT_IN_PROGRESS"
        assert api_client.get(f"{MANAGE_URL}current/").json()["id"] == a
