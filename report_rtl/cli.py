"""Command-line interface for report-rtl."""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from .core.fixer import RTLTextFixer
from .host import Label, Report, SubReport, TableCell
from .host import Table as TableBand
from .marks import DirectionalMark
from .settings import FixerSettings
from .text import escape_marks, fix_direction


console = Console()


def build_demo_report() -> Report:
    """Small invoice-like report: static caption, bound cells, parameter title, sub-report."""
    totals = Report(
        name="totals",
        controls=[Label(name="total_caption", text="جمع کل"), TableCell(name="total").bind("Total")],
        data_source=[{"Total": "۱۲۰٬۰۰۰ ریال"}],
    )
    report = Report(
        name="invoice",
        controls=[
            Label(name="title").bind("Title"),
            TableBand(
                name="lines",
                columns=3,
                controls=[
                    TableCell(name="item").bind("Item"),
                    TableCell(name="customer").bind("Customer"),
                    TableCell(name="quantity").bind("Quantity"),
                ],
            ),
            SubReport(name="totals", report_source=totals),
        ],
        data_source=[
            {"Item": "کتاب", "Customer": "علی", "Quantity": 2},
            {"Item": "Notebook (A5)", "Customer": "رضا", "Quantity": 3},
        ],
    )
    report.add_parameter("Title", "فاکتور فروش")
    return report


def cmd_marks(args) -> int:
    table = Table(title="Directional marks")
    table.add_column("Name", style="bold")
    table.add_column("Code point")
    for mark in DirectionalMark:
        table.add_row(mark.name, mark.code_point)
    console.print(table)
    return 0


def cmd_wrap(args) -> int:
    for text in args.text:
        wrapped = fix_direction(text)
        if args.escape:
            console.print(escape_marks(wrapped), markup=False, highlight=False)
        else:
            sys.stdout.write(wrapped + "\n")
    return 0


def cmd_demo(args, settings: FixerSettings) -> int:
    report = build_demo_report()
    RTLTextFixer(settings).fix(report)
    document = report.render()

    table = Table(title=f"Rendered '{report.name}'")
    table.add_column("Element", style="bold")
    table.add_column("Committed text")
    for entry in document.entries:
        table.add_row(entry.element, escape_marks(entry.text))
    console.print(table)
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="report-rtl",
        description="Right-to-left text direction fixes for report templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the directional marks
  report-rtl marks

  # Wrap text and show the injected marks
  report-rtl wrap "سلام دنیا" --escape

  # Fix and render the built-in sample report
  report-rtl demo
        """,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: REPORT_RTL_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("marks", help="List directional marks")

    wrap_parser = subparsers.add_parser("wrap", help="Wrap text in RTL embedding marks")
    wrap_parser.add_argument("text", nargs="+", help="Text to wrap")
    wrap_parser.add_argument(
        "--escape",
        action="store_true",
        help="Show marks as \\uXXXX escapes",
    )

    subparsers.add_parser("demo", help="Fix and render a sample report")

    args = parser.parse_args(argv)

    settings = FixerSettings()
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level.upper()})
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "marks":
        return cmd_marks(args)
    if args.command == "wrap":
        return cmd_wrap(args)
    return cmd_demo(args, settings)


if __name__ == "__main__":
    sys.exit(main())
