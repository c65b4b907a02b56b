"""Console entry point: print a decorated report, then deliver an order."""

import argparse
import sys
from typing import List, Optional, TextIO

from report_delivery.config import settings
from report_delivery.delivery.factory import create_delivery_service
from report_delivery.models.delivery import DeliveryProvider
from report_delivery.models.report import ReportDecoration, ReportKind
from report_delivery.reports.builder import ReportCompositionError, build_report
from report_delivery.utils.logger import logger

PROVIDER_PROMPT = "Choose a delivery service: " + " / ".join(p.value for p in DeliveryProvider)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="report-delivery",
        description="Print a decorated report and deliver an order through the chosen service.",
    )
    parser.add_argument(
        "--provider",
        type=str,
        help="Delivery service key (skips the stdin prompt); unknown keys use internal delivery",
    )
    parser.add_argument(
        "--order-id", type=str, default=settings.default_order_id, help="Order to deliver"
    )
    parser.add_argument(
        "--report",
        type=str.lower,
        choices=[kind.value for kind in ReportKind],
        default=settings.report_kind,
        help="Base report",
    )
    parser.add_argument(
        "--decorate",
        action="append",
        type=str.lower,
        choices=[decoration.value for decoration in ReportDecoration],
        help="Report decoration, applied in the order given (repeatable)",
    )
    return parser


def read_provider_key(stdin: TextIO) -> str:
    """Read one line from stdin; EOF or a blank line means the default provider."""
    line = stdin.readline()
    return line.strip() or settings.default_provider


def run(args: argparse.Namespace, stdin: TextIO | None = None) -> int:
    """Print the report section, then the delivery section. Return the exit code."""
    decorations = args.decorate if args.decorate is not None else settings.report_decorations
    try:
        report = build_report(args.report, decorations)
    except ReportCompositionError as e:
        logger.error(f"Report composition failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("REPORTS")
    print(report.generate())

    print("\nDELIVERY")
    if args.provider is not None:
        key = args.provider
    else:
        print(PROVIDER_PROMPT)
        key = read_provider_key(stdin or sys.stdin)

    delivery = create_delivery_service(key)
    delivery.deliver_order(args.order_id)
    print(delivery.get_delivery_status(args.order_id))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    args = build_parser().parse_args(argv)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
