"""
Tool Rental CLI

Command-line interface for the rental counter.

Usage:
    toolrental checkout --tool JAKR --date 07/02/20 --days 4 --discount 50
    toolrental checkout --tool LADW --date 2020-07-02 --days 3 --json
    toolrental tools
    toolrental holidays 2024
    toolrental interactive
    toolrental serve --port 8000

Exit codes:
    0  success
    2  invalid checkout input
    3  broken reference data
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import MAXYEAR, MINYEAR
from typing import Callable, Optional

from . import __version__
from .calendars import RentalCalendar
from .catalog import ReferenceData, load_reference_data
from .config import RuntimeConfig, configure_logging
from .engine import RentalAgreementBuilder
from .exceptions import ConfigurationError, InvalidCheckoutDate, ValidationError
from .formatting import date_format_hint, format_agreement, format_date, format_money

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2
EXIT_CONFIGURATION_ERROR = 3

QUIT = "q"
CONFIGURATION_ERROR_MESSAGE = (
    "There is an error in the rental application configuration. Please fix and retry."
)


def _load(args: argparse.Namespace) -> ReferenceData:
    return load_reference_data(args.data_dir)


def _report_configuration_error(e: ConfigurationError) -> int:
    logger.error("Reference data error: %s", e, extra={"error_code": e.code})
    print(str(e), file=sys.stderr)
    return EXIT_CONFIGURATION_ERROR


# =============================================================================
# Commands
# =============================================================================

def cmd_checkout(args: argparse.Namespace) -> int:
    """Compute and print one rental agreement."""
    try:
        data = _load(args)
        builder = RentalAgreementBuilder.from_reference_data(data)
        agreement = builder.compute_agreement(args.tool, args.date, args.days, args.discount)
    except ValidationError as e:
        print(str(e), file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ConfigurationError as e:
        return _report_configuration_error(e)

    if args.json:
        print(json.dumps(agreement.to_dict(), indent=2))
    else:
        print(format_agreement(agreement, data.settings))
    return EXIT_OK


def cmd_tools(args: argparse.Namespace) -> int:
    """List the tool catalog."""
    try:
        data = _load(args)
    except ConfigurationError as e:
        return _report_configuration_error(e)

    catalog = data.catalog
    print(f"{'Code':<6} {'Type':<12} {'Brand':<10} {'Daily':>8}  Weekday Weekend Holiday")
    print("-" * 66)
    for tool in catalog.tools():
        tool_type = catalog.tool_type_for(tool)
        flags = "".join(
            f"{'yes' if billed else 'no':<8}"
            for billed in (
                tool_type.weekday_chargeable,
                tool_type.weekend_chargeable,
                tool_type.holiday_chargeable,
            )
        )
        print(
            f"{tool.code:<6} {tool.type_name:<12} {tool.brand:<10} "
            f"{format_money(tool_type.daily_charge, data.settings):>8}  {flags.rstrip()}"
        )
    return EXIT_OK


def cmd_holidays(args: argparse.Namespace) -> int:
    """List the holidays observed in a year."""
    try:
        data = _load(args)
    except ConfigurationError as e:
        return _report_configuration_error(e)

    calendar = RentalCalendar(holiday_specs=data.holiday_specs, settings=data.settings)
    for observed in sorted(calendar.holidays_for_year(args.year)):
        print(
            f"{format_date(observed, data.settings)}  "
            f"{observed.strftime('%A'):<9}  {calendar.holiday_name(observed)}"
        )
    return EXIT_OK


def _prompt(message: str) -> Optional[str]:
    """Read one answer; None means the user quit."""
    try:
        answer = input(f"{message} ").strip()
    except EOFError:
        return None
    if answer.lower() == QUIT:
        return None
    return answer


def _prompt_until(message: str, parse: Callable[[str], object]) -> object:
    """Re-prompt until ``parse`` accepts the answer; None means the user quit."""
    while True:
        answer = _prompt(message)
        if answer is None:
            return None
        try:
            return parse(answer)
        except ValueError as e:
            print(e)


def _year(text: str) -> int:
    try:
        year = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text} is not a valid year") from None
    if not MINYEAR <= year <= MAXYEAR:
        raise argparse.ArgumentTypeError(f"year must be between {MINYEAR} and {MAXYEAR}")
    return year


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"{text} is not a valid number.") from None


def cmd_interactive(args: argparse.Namespace) -> int:
    """Prompt for checkouts until the user quits."""
    try:
        data = _load(args)
    except ConfigurationError as e:
        return _report_configuration_error(e)
    builder = RentalAgreementBuilder.from_reference_data(data)
    date_prompt = f"Please enter a rental date ({date_format_hint(data.settings)}):"

    def parse_date(text: str) -> object:
        try:
            return builder.parse_checkout_date(text)
        except InvalidCheckoutDate as e:
            raise ValueError(e.message) from None

    while True:
        print(f"\nPress '{QUIT}' at any prompt to quit.")
        tool_code = _prompt("Please enter a tool code to rent:")
        if tool_code is None:
            return EXIT_OK
        checkout_date = _prompt_until(date_prompt, parse_date)
        if checkout_date is None:
            return EXIT_OK
        rental_days = _prompt_until("Please enter the number of days to rent:", _parse_int)
        if rental_days is None:
            return EXIT_OK
        discount = _prompt_until("Please enter the discount:", _parse_int)
        if discount is None:
            return EXIT_OK

        try:
            agreement = builder.compute_agreement(tool_code, checkout_date, rental_days, discount)
        except ValidationError as e:
            print(e.message)
            continue
        except ConfigurationError as e:
            print(CONFIGURATION_ERROR_MESSAGE)
            return _report_configuration_error(e)
        print()
        print(format_agreement(agreement, data.settings))


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API."""
    import uvicorn

    from .api import create_app

    try:
        app = create_app(_load(args))
    except ConfigurationError as e:
        return _report_configuration_error(e)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
    return EXIT_OK


# =============================================================================
# Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    runtime = RuntimeConfig.from_env()
    parser = argparse.ArgumentParser(
        description="Tool rental agreements",
        prog="toolrental",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Reference data directory (default: TOOLRENTAL_DATA_DIR or bundled data)",
    )
    parser.add_argument(
        "--log-level",
        default=runtime.log_level,
        help="Log level (default: TOOLRENTAL_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Checkout command
    checkout_parser = subparsers.add_parser("checkout", help="Compute a rental agreement")
    checkout_parser.add_argument("--tool", required=True, help="Tool code, e.g. LADW")
    checkout_parser.add_argument(
        "--date", required=True, help="Checkout date (mm/dd/yy or YYYY-MM-DD)"
    )
    checkout_parser.add_argument("--days", required=True, type=int, help="Rental days")
    checkout_parser.add_argument(
        "--discount", type=int, default=0, help="Discount percent, 0-100 (default: 0)"
    )
    checkout_parser.add_argument("--json", action="store_true", help="Print JSON")
    checkout_parser.set_defaults(func=cmd_checkout)

    # Tools command
    tools_parser = subparsers.add_parser("tools", help="List the tool catalog")
    tools_parser.set_defaults(func=cmd_tools)

    # Holidays command
    holidays_parser = subparsers.add_parser("holidays", help="List holidays for a year")
    holidays_parser.add_argument("year", type=_year, help="Calendar year")
    holidays_parser.set_defaults(func=cmd_holidays)

    # Interactive command
    interactive_parser = subparsers.add_parser("interactive", help="Prompt for checkouts")
    interactive_parser.set_defaults(func=cmd_interactive)

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    runtime = RuntimeConfig.from_env()
    try:
        configure_logging(args.log_level, json_format=runtime.log_format == "json")
    except ValueError as e:
        parser.error(str(e))

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
