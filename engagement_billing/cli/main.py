"""
CLI interface for Engagement Billing.

Bills engagements given as minute counts and prints invoices.
"""

import sys
from typing import List, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from engagement_billing.config.loader import DEFAULT_CONFIG, load_app_config
from engagement_billing.core.billing import BillingService
from engagement_billing.core.intake import (
    engagements_from_minutes,
    parse_minutes,
    read_minutes_file
)
from engagement_billing.core.report import (
    BillingReport,
    format_currency,
    format_hours,
    summarize_reports
)
from engagement_billing.logging_config import configure_logging

app = typer.Typer()
console = Console()

EXIT_CODE_PASS = 0
EXIT_CODE_FAIL = 1


# Negative minute counts such as "-400" must reach the arguments list, so
# the command has no short options for them to be mistaken for
@app.command(context_settings={"ignore_unknown_options": True})
def process(
    ctx: typer.Context,
    minutes: Optional[List[str]] = typer.Argument(
        None,
        help="Engagement lengths in minutes",
        show_default=False
    ),
    file: Optional[str] = typer.Option(
        None,
        "--file",
        help="Process billing reports based on the minute values in this file"
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        help="YAML settings file"
    )
):
    """
    Bill engagements and print an invoice for each one.

    Engagement lengths come from --file (one value per line) or, when no
    file is given, from the MINUTES arguments. Values that are not numbers
    are skipped with a warning.
    """
    try:
        app_config = load_app_config(config) if config else DEFAULT_CONFIG
        configure_logging(app_config.logging.level)

        if file:
            values = read_minutes_file(file)
        else:
            values = parse_minutes(minutes or [])
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False)
        console.print(ctx.get_help(), markup=False, highlight=False)
        sys.exit(EXIT_CODE_FAIL)

    service = BillingService()
    reports = service.process_all(engagements_from_minutes(values))

    if not reports:
        console.print("\n[bold yellow]No engagements to bill[/]\n")
        sys.exit(EXIT_CODE_PASS)

    _display_reports(reports, show_summary=app_config.invoice.show_summary)
    sys.exit(EXIT_CODE_PASS)


def _display_reports(reports: List[BillingReport], show_summary: bool = True):
    """Print an invoice per report, then the batch totals."""
    for report in reports:
        console.print("INVOICE", highlight=False)
        console.print("=" * 26, highlight=False)
        console.print(f"Report ID:     {report.report_id_str}", highlight=False)
        console.print(f"Billed For:    {format_hours(report.engagement.hours)} hrs.", highlight=False)
        console.print(f"Amount Billed: {report.billed_as_currency}", highlight=False)
        console.print()

    if not show_summary:
        return

    summary = summarize_reports(reports)
    console.print(f"\nTOTAL BILLED: {format_currency(summary.total)}", highlight=False)
    console.print(f"AVG. CHARGE PER CUSTOMER: {format_currency(summary.average)}", highlight=False)


if __name__ == "__main__":
    app()
