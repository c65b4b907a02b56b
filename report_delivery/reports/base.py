"""Base reports with fixed content."""

from report_delivery.reports.abstractions import IReport

SALES_REPORT_TEXT = "Sales report: product A - 1000 KZT, product B - 500 KZT."
USER_REPORT_TEXT = "Users report: Ilya, Katya, Sasha."


class SalesReport(IReport):
    """Sales figures per product."""

    def generate(self) -> str:
        return SALES_REPORT_TEXT


class UserReport(IReport):
    """Registered users."""

    def generate(self) -> str:
        return USER_REPORT_TEXT
