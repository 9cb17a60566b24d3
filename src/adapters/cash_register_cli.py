"""CLI adapter for the daily cash register.

This module wires the register use cases to the concrete database adapter
and exposes one subcommand per operation::

    caja open --amount 100
    caja sale 50
    caja expense 20
    caja close 1 --withdraw 30
    caja report
"""

import argparse
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from src.domain.errors import CashRegisterError
from src.domain.models.cash_register import LedgerKind, RegisterReport
from src.infrastructure.container import (
    build_close_register_use_case,
    build_database_adapter,
    build_last_closing_balance_use_case,
    build_list_registers_use_case,
    build_open_register_use_case,
    build_record_ledger_entry_use_case,
    build_register_report_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.schema import create_schema
from src.infrastructure.settings import CajaSettings


def _parse_amount(value: str) -> Decimal:
    """Parse a monetary amount for argparse.

    Args:
        value: Raw command-line value.

    Returns:
        Decimal: Parsed amount.

    Raises:
        argparse.ArgumentTypeError: If the value is not a number.
    """
    try:
        amount = Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid amount '{value}'"
        ) from exc
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"Invalid amount '{value}'")
    return amount


def _format_amount(value: Decimal | None, symbol: str) -> str:
    """Format amounts for display, keeping missing values visible."""
    if value is None:
        return "—"
    return f"{value:,.2f} {symbol}"


def _print_report(report: RegisterReport, symbol: str) -> None:
    status = "open" if report.is_open else "closed"
    print(f"Register #{report.id} ({report.business_date}, {status})")
    rows = [
        ("Opening balance", report.opening_balance),
        ("Income", report.income),
        ("Expense", report.expense),
        ("Cash on hand", report.cash_on_hand),
        ("Handed over", report.handed_over),
        ("Net profit", report.net_profit),
    ]
    for label, value in rows:
        caption = f"{label}:"
        print(f"  {caption:<17}{_format_amount(value, symbol)}")


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``caja`` command."""
    parser = argparse.ArgumentParser(
        prog="caja",
        description="Manage the restaurant's daily cash register.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    report = commands.add_parser("report", help="Show a register report")
    report.add_argument("--id", type=int, default=None, dest="register_id")

    commands.add_parser("list", help="List every register")

    open_cmd = commands.add_parser("open", help="Open today's register")
    open_cmd.add_argument("--amount", type=_parse_amount, default=None)

    close_cmd = commands.add_parser("close", help="Close a register")
    close_cmd.add_argument("register_id", type=int)
    close_cmd.add_argument("--withdraw", type=_parse_amount, required=True)

    commands.add_parser(
        "last-balance",
        help="Show the closing balance of the latest register",
    )

    for kind in LedgerKind:
        name = "sale" if kind is LedgerKind.SALES else "expense"
        entry = commands.add_parser(name, help=f"Record a {name}")
        entry.add_argument("total", type=_parse_amount)
        entry.set_defaults(kind=kind)

    commands.add_parser("init-db", help="Create the database tables")
    return parser


def _run(args: argparse.Namespace, symbol: str) -> None:
    usage = get_usage_logger()
    if args.command == "report":
        report = build_register_report_use_case().execute(args.register_id)
        _print_report(report, symbol)
    elif args.command == "list":
        reports = build_list_registers_use_case().execute()
        if not reports:
            print("No cash registers found.")
        for report in reports:
            _print_report(report, symbol)
    elif args.command == "open":
        register = build_open_register_use_case().execute(args.amount)
        usage.info(f"open register={register.id} amount={args.amount}")
        print(
            f"Opened register #{register.id} for {register.business_date} "
            f"with {_format_amount(register.opening_balance, symbol)}"
        )
    elif args.command == "close":
        register = build_close_register_use_case().execute(
            args.register_id,
            args.withdraw,
        )
        usage.info(
            f"close register={register.id} withdrawal={args.withdraw}"
        )
        print(
            f"Closed register #{register.id}, handed over "
            f"{_format_amount(register.closing_balance, symbol)}"
        )
    elif args.command == "last-balance":
        balance = build_last_closing_balance_use_case().execute()
        print(_format_amount(balance, symbol))
    elif args.command in ("sale", "expense"):
        entry = build_record_ledger_entry_use_case().execute(
            args.kind,
            args.total,
        )
        usage.info(f"record {entry.kind.value} total={entry.total}")
        print(f"Recorded {args.command} #{entry.id}: {entry.total}")
    elif args.command == "init-db":
        create_schema(build_database_adapter().get_engine())
        print("Database tables are ready.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``caja`` command.

    Returns:
        int: Process exit status, 1 when a register rule rejects the call.
    """
    args = build_parser().parse_args(argv)
    settings = CajaSettings.from_env()
    try:
        _run(args, settings.currency_symbol)
    except CashRegisterError as exc:
        get_app_logger().error(f"{args.command} failed: {exc}")
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
