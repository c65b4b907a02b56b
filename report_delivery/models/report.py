"""Report kinds and decoration names."""

from enum import Enum


class ReportKind(str, Enum):
    """Base reports that can start a decorator chain."""

    SALES = "sales"
    USERS = "users"


class ReportDecoration(str, Enum):
    """Decorators that can be stacked on a report, by name."""

    DATE_FILTER = "date_filter"
    SORTING = "sorting"
    WORD_EXPORT = "word_export"
    PDF_EXPORT = "pdf_export"
