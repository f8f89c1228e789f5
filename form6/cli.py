"""
Form6 CLI - FERC Form 6 filing explorer

Usage:
    form6 list                        # Filings in the source directory
    form6 search <term>               # Filings whose company name matches
    form6 summary <file_id>           # Financial summary of one filing
    form6 details <file_id>           # Detail report of one filing
    form6 value <file_id>             # Three-approach valuation
    form6 config show|validate        # Configuration operations

Add --json to any extraction command for machine-readable output.
"""

import argparse
import json
import sys
from typing import Any

from tabulate import tabulate

from .core.exceptions import FilingNotFoundError, Form6Error
from .extraction.taxonomy import CATEGORY_FIELDS
from .service import FilingService
from .utils.config import get_config
from .utils.logger import get_logger, setup_logging

logger = get_logger("form6.cli")

CATEGORY_TITLES = {
    "financial_data": "FINANCIAL DATA",
    "revenues": "REVENUES",
    "operating_expenses": "OPERATING EXPENSES",
    "general_expenses": "GENERAL EXPENSES",
    "asset_data": "ASSETS",
    "liabilities_equity": "LIABILITIES AND EQUITY",
    "cash_flow": "CASH FLOW",
    "operational_data": "OPERATIONAL DATA",
    "rate_base": "RATE BASE",
}


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


def _money(value: float) -> str:
    return f"${value:,.0f}"


class Form6CLI:
    """Command handlers for the filing explorer."""

    def __init__(self):
        """Initialize CLI."""
        self.config = get_config()
        self.service = FilingService()

    def cmd_list(self, args) -> int:
        """List available filings."""
        filings = self.service.list_filings()
        if args.json:
            _print_json([f.to_dict() for f in filings])
            return 0

        if not filings:
            print(f"\nNo filings found in {self.service.repository.source_dir}\n")
            return 0

        rows = [[f.company, f.id] for f in filings]
        print()
        print(tabulate(rows, headers=["Company", "File"], tablefmt="simple"))
        print(f"\n{len(filings)} filing(s)\n")
        return 0

    def cmd_search(self, args) -> int:
        """Search filings by company name."""
        term = args.term.strip()
        if not term:
            print("Search term required", file=sys.stderr)
            return 2

        filings = self.service.search(term)
        if args.json:
            _print_json([f.to_dict() for f in filings])
            return 0

        if not filings:
            print(f"\nNo filings match '{term}'\n")
            return 0

        rows = [[f.company, f.id] for f in filings]
        print()
        print(tabulate(rows, headers=["Company", "File"], tablefmt="simple"))
        print()
        return 0

    def cmd_summary(self, args) -> int:
        """Show the financial summary of one filing."""
        summary = self.service.get_financial_summary(args.file_id)
        if summary is None:
            print(f"No data in {args.file_id}", file=sys.stderr)
            return 1

        if args.json:
            if args.overview:
                _print_json(summary.to_overview(self.service.report_year))
            else:
                _print_json(summary.to_dict())
            return 0

        print("\n" + "=" * 80)
        print(f"  {summary.company_name}")
        print("=" * 80 + "\n")
        rows = [
            ["Trunk Revenues", _money(summary.trunk_revenues)],
            ["Gathering Revenues", _money(summary.gathering_revenues)],
            ["Delivery Revenues", _money(summary.delivery_revenues)],
            ["Operating Revenue", _money(summary.operating_revenue)],
            ["Operation Expenses", _money(summary.operation_expenses)],
            ["Maintenance Expenses", _money(summary.maintenance_expenses)],
            ["Operating Expenses", _money(summary.operating_expenses)],
            ["EBITDA", _money(summary.ebitda)],
            ["Net Income", _money(summary.net_income)],
            ["Carrier Property", _money(summary.carrier_property)],
            ["Total Assets", _money(summary.total_assets)],
        ]
        print(tabulate(rows, headers=["Item", "Value"], tablefmt="simple", colalign=("left", "right")))
        print()
        return 0

    def cmd_details(self, args) -> int:
        """Show the detail report of one filing."""
        report = self.service.get_detail_report(args.file_id)
        if report is None:
            print(f"No data in {args.file_id}", file=sys.stderr)
            return 1

        if args.json:
            _print_json(report.to_dict())
            return 0

        print("\n" + "=" * 80)
        print(f"  {report.company_name} - DETAIL REPORT")
        print("=" * 80 + "\n")

        if report.company_info:
            print("COMPANY INFORMATION:")
            for key, value in report.company_info.items():
                print(f"  {key:.<40} {value}")
            print()

        print("PIPELINE NETWORK:")
        print(f"  {'Total Miles':.<40} {report.total_miles:,.1f}")
        print(f"  {'Mileage Source':.<40} {report.total_miles_source or 'none'}")
        if report.states:
            print(f"  {'States':.<40} {', '.join(report.states)}")
        print()

        if report.pipelines:
            rows = [
                [p.name, p.id, "" if p.miles is None else f"{p.miles:,.1f}", ", ".join(p.states)]
                for p in report.pipelines
            ]
            print(tabulate(rows, headers=["Pipeline", "ID", "Miles", "States"], tablefmt="simple"))
            print()

        if report.pipeline_segments:
            rows = [
                [
                    s.start_point,
                    s.end_point,
                    s.gathering_miles,
                    s.trunk_crude_miles,
                    s.trunk_product_miles,
                ]
                for s in report.pipeline_segments
            ]
            headers = ["From", "To", "Gathering mi", "Crude mi", "Products mi"]
            print(tabulate(rows, headers=headers, tablefmt="simple", numalign="right"))
            print()

        for attribute in CATEGORY_FIELDS:
            values = report.category(attribute)
            if not values:
                continue
            print(f"{CATEGORY_TITLES[attribute]}:")
            rows = [[label, f"{value:,.0f}"] for label, value in values.items()]
            print(tabulate(rows, tablefmt="simple", colalign=("left", "right")))
            print()
        return 0

    def cmd_value(self, args) -> int:
        """Value the pipeline described by one filing."""
        result = self.service.get_valuation(args.file_id, as_of_year=args.as_of_year)
        if result is None:
            print(f"No data in {args.file_id}", file=sys.stderr)
            return 1

        if args.json:
            _print_json(result.to_dict())
            return 0

        cost_w, income_w, market_w = result.normalized_weights
        rows = [
            ["Cost", _money(result.cost.value), f"{cost_w:.0%}"],
            ["Income", _money(result.income.value), f"{income_w:.0%}"],
            ["Market", _money(result.market.value), f"{market_w:.0%}"],
        ]
        print()
        print(tabulate(rows, headers=["Approach", "Value", "Weight"], tablefmt="simple", colalign=("left", "right", "right")))
        print(f"\nFinal valuation: {_money(result.final_value)}\n")
        if args.notes:
            print(result.to_notes())
            print()
        return 0

    def cmd_config(self, args) -> int:
        """Configuration operations."""
        if args.action == "show":
            if args.json:
                _print_json(self.config.settings.model_dump())
                return 0

            print("\nCurrent Configuration:\n")
            print(f"Environment: {self.config.environment.value}")
            print(f"Filing directory: {self.config.filings_dir}")
            print()
            print("Filings:")
            for key, value in self.config.get_filings_config().items():
                print(f"  {key}: {value}")
            print("Context policy:")
            for key, value in self.config.get_context_policy_config().items():
                print(f"  {key}: {value}")
            print("Valuation:")
            for key, value in self.config.get_valuation_config().items():
                print(f"  {key}: {value}")
            print()
            return 0

        errors = self.config.validate()
        if errors:
            print("\nConfiguration errors:")
            for error in errors:
                print(f"  - {error}")
            print()
            return 1
        print("\nConfiguration is valid\n")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="form6",
        description="FERC Form 6 filing explorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", type=str, help="Override log level")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    list_parser = subparsers.add_parser("list", help="List available filings")
    list_parser.add_argument("--json", action="store_true", help="Output JSON")

    search_parser = subparsers.add_parser("search", help="Search filings by company name")
    search_parser.add_argument("term", type=str)
    search_parser.add_argument("--json", action="store_true", help="Output JSON")

    summary_parser = subparsers.add_parser("summary", help="Financial summary of a filing")
    summary_parser.add_argument("file_id", type=str)
    summary_parser.add_argument("--json", action="store_true", help="Output JSON")
    summary_parser.add_argument(
        "--overview", action="store_true", help="Emit the overview record (with --json)"
    )

    details_parser = subparsers.add_parser("details", help="Detail report of a filing")
    details_parser.add_argument("file_id", type=str)
    details_parser.add_argument("--json", action="store_true", help="Output JSON")

    value_parser = subparsers.add_parser("value", help="Valuation of a filing")
    value_parser.add_argument("file_id", type=str)
    value_parser.add_argument("--as-of-year", type=int, help="Year used for asset age")
    value_parser.add_argument("--notes", action="store_true", help="Print the evaluation notes")
    value_parser.add_argument("--json", action="store_true", help="Output JSON")

    config_parser = subparsers.add_parser("config", help="Configuration operations")
    config_parser.add_argument("action", choices=["show", "validate"])
    config_parser.add_argument("--json", action="store_true", help="Output JSON")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(log_level=args.log_level)

    cli = Form6CLI()
    handlers = {
        "list": cli.cmd_list,
        "search": cli.cmd_search,
        "summary": cli.cmd_summary,
        "details": cli.cmd_details,
        "value": cli.cmd_value,
        "config": cli.cmd_config,
    }

    try:
        return handlers[args.command](args)
    except FilingNotFoundError as e:
        print(f"Filing not found: {e.file_id}", file=sys.stderr)
        return 3
    except Form6Error as e:
        logger.error(f"Command '{args.command}' failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
