"""Console interface for the finance ledger."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from ledger.config import LedgerConfig
from ledger.exceptions import ValidationError
from ledger.models import Transaction, format_amount
from ledger.services import LedgerService


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Port must be an integer") from exc
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError("Port must be between 1 and 65535")
    return port


def _format_transaction(transaction: Transaction, symbol: str) -> str:
    sign = "+" if transaction.type.value == "income" else "-"
    return (
        f"[{transaction.id}] {transaction.date.isoformat()} "
        f"{sign}{format_amount(transaction.amount, symbol)}\n"
        f"  {transaction.description} | Category: {transaction.category} "
        f"| Payment: {transaction.payment_method}\n"
    )


def handle_summary(ledger: LedgerService, symbol: str) -> None:
    transactions = ledger.list_transactions()
    if not transactions:
        print("No transactions recorded.")
    else:
        print(f"{len(transactions)} transactions:")
        for transaction in transactions:
            print(_format_transaction(transaction, symbol))

    aggregates = ledger.get_aggregates()
    goal = ledger.get_goal_progress()
    print(f"Total income:   {format_amount(aggregates.total_income, symbol)}")
    print(f"Total expenses: {format_amount(aggregates.total_expenses, symbol)}")
    print(f"Balance:        {format_amount(aggregates.balance, symbol)}")
    print(
        f"Savings goal:   {format_amount(goal.savings_goal, symbol)} "
        f"({goal.progress_percent}% reached)"
    )


def handle_serve(args: argparse.Namespace, config: LedgerConfig) -> None:
    from api.app import create_app

    app = create_app(config)
    app.run(host=args.host, port=args.port, debug=config.is_development)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Personal finance ledger")
    parser.add_argument(
        "--demo",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Seed the session with sample transactions (default: LEDGER_SEED_DEMO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the JSON API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=_parse_port, default=5000)

    subparsers.add_parser("summary", help="Print transactions, totals and goal progress")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = LedgerConfig.from_env()
        if args.demo is not None:
            config = replace(config, seed_demo=args.demo)
        logging.basicConfig(
            level=config.log_level,
            format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
        )
        if args.command == "serve":
            handle_serve(args, config)
        elif args.command == "summary":
            handle_summary(LedgerService.from_config(config), config.currency_symbol)
        else:  # pragma: no cover - argparse should prevent this
            parser.error(f"Unknown command: {args.command}")
            return 2
    except ValidationError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
