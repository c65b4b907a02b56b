"""Report decorators - each appends one fixed line to the wrapped report."""

from abc import abstractmethod

from report_delivery.reports.abstractions import IReport


class ReportDecorator(IReport):
    """
    Wraps a report and appends ``suffix`` on its own line.

    The wrapped report is generated first, so stacking decorators yields
    their suffixes in the order they were applied.
    """

    @property
    @abstractmethod
    def suffix(self) -> str:
        """Line appended after the wrapped report's text."""
        pass

    def __init__(self, report: IReport):
        self._report = report

    @property
    def wrapped(self) -> IReport:
        """The report this decorator wraps."""
        return self._report

    def generate(self) -> str:
        return f"{self._report.generate()}\n{self.suffix}"


class DateFilterDecorator(ReportDecorator):
    """Restricts the report to the last week."""

    suffix = "Filter: last 7 days."


class SortingDecorator(ReportDecorator):
    """Orders report rows by date."""

    suffix = "Sorting: by date."


class WordExportDecorator(ReportDecorator):
    """Marks the report as exported to Word."""

    suffix = "Export: Word document (.docx) created."


class PdfExportDecorator(ReportDecorator):
    """Marks the report as exported to PDF."""

    suffix = "Export: PDF file created."
