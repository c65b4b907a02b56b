"""KazPost adapter - exposes KazPostService through IDeliveryService."""

from report_delivery.delivery.abstractions import IDeliveryService
from report_delivery.services.kazpost_service import KazPostService


class KazPostAdapter(IDeliveryService):
    """Maps deliver_order -> ship_package and get_delivery_status -> check_status."""

    def __init__(self, service: KazPostService | None = None):
        self._service = service or KazPostService()

    def deliver_order(self, order_id: str) -> None:
        self._service.ship_package(order_id)

    def get_delivery_status(self, order_id: str) -> str:
        return self._service.check_status(order_id)
