"""Order delivery layer - common interface, backend adapters and factory."""

from report_delivery.delivery.abstractions import IDeliveryService
from report_delivery.delivery.factory import create_delivery_service
from report_delivery.delivery.internal import InternalDeliveryService
from report_delivery.delivery.kazpost_adapter import KazPostAdapter
from report_delivery.delivery.yandex_adapter import YandexGoAdapter

__all__ = [
    "IDeliveryService",
    "InternalDeliveryService",
    "YandexGoAdapter",
    "KazPostAdapter",
    "create_delivery_service",
]
