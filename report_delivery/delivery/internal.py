"""Internal delivery - handled by our own couriers, no external backend."""

import sys
from typing import TextIO

from report_delivery.delivery.abstractions import IDeliveryService
from report_delivery.utils.logger import logger


class InternalDeliveryService(IDeliveryService):
    """Delivers orders with the in-house fleet."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def deliver_order(self, order_id: str) -> None:
        logger.debug(f"Internal delivery: deliver_order({order_id})")
        print(
            f"Internal delivery of order {order_id} has been arranged.",
            file=sys.stdout if self._stream is None else self._stream,
        )

    def get_delivery_status(self, order_id: str) -> str:
        return f"Status: order {order_id} delivered."
