"""Yandex Go adapter - exposes YandexGoService through IDeliveryService."""

from report_delivery.delivery.abstractions import IDeliveryService
from report_delivery.services.yandex_go_service import YandexGoService


class YandexGoAdapter(IDeliveryService):
    """Maps deliver_order -> send_order and get_delivery_status -> track."""

    def __init__(self, service: YandexGoService | None = None):
        self._service = service or YandexGoService()

    def deliver_order(self, order_id: str) -> None:
        self._service.send_order(order_id)

    def get_delivery_status(self, order_id: str) -> str:
        return self._service.track(order_id)
