import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.catalog.repositories import catalog_repository
from modules.orders.repositories import order_repository

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    """Report liveness with a summary of the order store and the catalog."""
    orders = order_repository.list_all()
    in_progress_id = order_repository.current_in_progress_id()

    services = {
        "order_store": {
            "status": "up",
            "orders": len(orders),
            "in_progress": in_progress_id is not None,
        },
        "catalog": {
            "status": "up",
            "entries": [entry.id for entry in catalog_repository.list_all()],
        },
    }

    logger.info("health_check_completed", status="healthy")

    return JsonResponse(
        {
            "status": "healthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        }
    )
