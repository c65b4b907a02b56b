"""Report generation layer - base reports and stackable decorators."""

from report_delivery.reports.abstractions import IReport
from report_delivery.reports.base import SalesReport, UserReport
from report_delivery.reports.builder import (
    ReportCompositionError,
    build_report,
    create_report,
    decorate,
)
from report_delivery.reports.decorators import (
    DateFilterDecorator,
    PdfExportDecorator,
    ReportDecorator,
    SortingDecorator,
    WordExportDecorator,
)

__all__ = [
    "IReport",
    "SalesReport",
    "UserReport",
    "ReportDecorator",
    "DateFilterDecorator",
    "SortingDecorator",
    "WordExportDecorator",
    "PdfExportDecorator",
    "ReportCompositionError",
    "create_report",
    "decorate",
    "build_report",
]
