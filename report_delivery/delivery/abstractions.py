"""Abstract interface for order delivery (SOLID - Interface Segregation, Dependency Inversion)."""

from abc import ABC, abstractmethod


class IDeliveryService(ABC):
    """Abstract interface for delivering orders and reporting their status."""

    @abstractmethod
    def deliver_order(self, order_id: str) -> None:
        """
        Submit order for delivery.

        :param order_id: Order identifier, passed through to the backend unchanged.
        Emits one confirmation line; returns nothing.
        """
        pass

    @abstractmethod
    def get_delivery_status(self, order_id: str) -> str:
        """
        Query delivery status.

        :param order_id: Order identifier.
        :return: Backend-specific status text mentioning the order.
        """
        pass
