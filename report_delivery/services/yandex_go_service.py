"""Yandex Go courier client (stubbed - prints instead of calling the API)."""

import sys
from typing import TextIO

from report_delivery.utils.logger import logger


class YandexGoService:
    """Courier client with Yandex Go's native call names."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def send_order(self, order_id: str) -> None:
        """Hand an order over to a Yandex Go courier."""
        logger.debug(f"Yandex Go: send_order({order_id})")
        print(
            f"Yandex Go: order {order_id} accepted, courier dispatched.",
            file=sys.stdout if self._stream is None else self._stream,
        )

    def track(self, order_id: str) -> str:
        logger.debug(f"Yandex Go: track({order_id})")
        return f"Yandex Go: order {order_id} is on the way."
