"""Delivery service factory."""

from typing import Callable, Dict

from report_delivery.delivery.abstractions import IDeliveryService
from report_delivery.delivery.internal import InternalDeliveryService
from report_delivery.delivery.kazpost_adapter import KazPostAdapter
from report_delivery.delivery.yandex_adapter import YandexGoAdapter
from report_delivery.models.delivery import DeliveryProvider
from report_delivery.utils.logger import logger

PROVIDERS: Dict[DeliveryProvider, Callable[[], IDeliveryService]] = {
    DeliveryProvider.INTERNAL: InternalDeliveryService,
    DeliveryProvider.YANDEX: YandexGoAdapter,
    DeliveryProvider.KAZPOST: KazPostAdapter,
}


def create_delivery_service(key: "str | DeliveryProvider | None") -> IDeliveryService:
    """
    Create the delivery service selected by ``key``.

    Keys are case-insensitive. Unknown keys get internal delivery; this is
    the default, not an error.
    """
    provider = DeliveryProvider.from_key(key)
    if not isinstance(key, DeliveryProvider) and not DeliveryProvider.is_known(key):
        logger.info(f"Unknown delivery provider {key!r}, using {provider.value}")
    service = PROVIDERS[provider]()
    logger.debug(f"Created {type(service).__name__} for key {key!r}")
    return service
