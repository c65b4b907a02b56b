"""Abstract interface for report generation."""

from abc import ABC, abstractmethod


class IReport(ABC):
    """Anything that can produce report text."""

    @abstractmethod
    def generate(self) -> str:
        """
        Produce the report text.

        :return: Report text; never raises.
        """
        pass
