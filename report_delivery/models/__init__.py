"""Domain enumerations for reports and delivery providers."""

from report_delivery.models.delivery import DeliveryProvider
from report_delivery.models.report import ReportDecoration, ReportKind

__all__ = [
    "DeliveryProvider",
    "ReportKind",
    "ReportDecoration",
]
