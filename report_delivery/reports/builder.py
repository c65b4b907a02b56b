"""Build decorated reports from kinds and decoration names."""

import inspect
from typing import Callable, Dict, Iterable, Type, Union

from report_delivery.models.report import ReportDecoration, ReportKind
from report_delivery.reports.abstractions import IReport
from report_delivery.reports.base import SalesReport, UserReport
from report_delivery.reports.decorators import (
    DateFilterDecorator,
    PdfExportDecorator,
    ReportDecorator,
    SortingDecorator,
    WordExportDecorator,
)
from report_delivery.utils.logger import logger


class ReportCompositionError(Exception):
    """Raised when a report kind or decoration name is not recognised."""

    pass


REPORTS: Dict[ReportKind, Callable[[], IReport]] = {
    ReportKind.SALES: SalesReport,
    ReportKind.USERS: UserReport,
}

DECORATORS: Dict[ReportDecoration, Type[ReportDecorator]] = {
    ReportDecoration.DATE_FILTER: DateFilterDecorator,
    ReportDecoration.SORTING: SortingDecorator,
    ReportDecoration.WORD_EXPORT: WordExportDecorator,
    ReportDecoration.PDF_EXPORT: PdfExportDecorator,
}

DecorationSpec = Union[str, ReportDecoration, Type[ReportDecorator]]


def create_report(kind: Union[str, ReportKind]) -> IReport:
    """Create a base report by kind (case-insensitive)."""
    try:
        report_kind = ReportKind(kind.lower() if isinstance(kind, str) else kind)
    except ValueError as e:
        allowed = [k.value for k in ReportKind]
        raise ReportCompositionError(f"Unknown report kind {kind!r}; allowed: {allowed}") from e
    return REPORTS[report_kind]()


def _resolve_decorator(spec: DecorationSpec) -> Type[ReportDecorator]:
    if isinstance(spec, type) and issubclass(spec, ReportDecorator):
        if inspect.isabstract(spec):
            raise ReportCompositionError(
                f"{spec.__name__} has no suffix and cannot decorate a report"
            )
        return spec
    try:
        decoration = ReportDecoration(spec.lower() if isinstance(spec, str) else spec)
    except ValueError as e:
        allowed = [d.value for d in ReportDecoration]
        raise ReportCompositionError(
            f"Unknown report decoration {spec!r}; allowed: {allowed}"
        ) from e
    return DECORATORS[decoration]


def decorate(report: IReport, decorations: Iterable[DecorationSpec]) -> IReport:
    """
    Wrap ``report`` with each decoration, first to last.

    The last decoration becomes the outermost wrapper, so its line ends the
    generated text. Names are resolved before any wrapping happens.
    """
    decorator_classes = [_resolve_decorator(spec) for spec in decorations]
    for decorator_cls in decorator_classes:
        report = decorator_cls(report)
    logger.debug(
        f"Composed {type(report).__name__} with "
        f"{[cls.__name__ for cls in decorator_classes]}"
    )
    return report


def build_report(
    kind: Union[str, ReportKind], decorations: Iterable[DecorationSpec] = ()
) -> IReport:
    """Create a base report and apply decorations in order."""
    return decorate(create_report(kind), decorations)
