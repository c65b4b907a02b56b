"""KazPost parcel client (stubbed - prints instead of calling the API)."""

import sys
from typing import TextIO

from report_delivery.utils.logger import logger


class KazPostService:
    """Postal client with KazPost's native call names."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def ship_package(self, package_id: str) -> None:
        """Register a parcel for sorting."""
        logger.debug(f"KazPost: ship_package({package_id})")
        print(
            f"KazPost: parcel {package_id} accepted for sorting.",
            file=sys.stdout if self._stream is None else self._stream,
        )

    def check_status(self, package_id: str) -> str:
        logger.debug(f"KazPost: check_status({package_id})")
        return f"KazPost: parcel {package_id} awaiting delivery."
