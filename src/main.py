"""CB Controle - Command line access to the stall ledger.

Supports:
- stats: Print the dashboard figures
- sale / expense / capital: Register entries
- delete-sale / delete-expense: Remove entries by id
- history: List sales grouped per day
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from src.app.logic.capital import is_valid_expense
from src.app.logic.history import group_sales_by_day
from src.app.logic.sale_form import is_valid_sale_amount
from src.config.settings import settings
from src.core.domain_models import PaymentMethod
from src.core.formatting import format_currency, format_time
from src.core.ledger import Ledger


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def open_ledger(args: argparse.Namespace) -> Ledger:
    data_dir = Path(args.data_dir) if args.data_dir else settings.data_dir
    return Ledger.open(data_dir, key=settings.storage_key)


def cmd_stats(args: argparse.Namespace) -> None:
    """Print the dashboard statistics."""
    stats = open_ledger(args).stats()
    if args.json:
        print(stats.model_dump_json(by_alias=True, indent=2))
        return

    print(f"Lucro líquido:  {format_currency(stats.profit)}")
    print(f"Investimento:   {format_currency(stats.total_out)}")
    print(f"Meta:           {round(stats.break_even_percentage)}%")
    print(f"Vendido hoje:   {format_currency(stats.total_sales_today)}")
    print(f"Total FDS:      {format_currency(stats.total_sales_weekend)}")
    print(f"PIX:            {format_currency(stats.total_pix)}")
    print(f"Dinheiro:       {format_currency(stats.total_cash)}")
    print(f"Saídas extras:  {format_currency(stats.total_expenses)}")
    print(f"Vendas:         {stats.sales_count}")
    print(f"Ticket médio:   {format_currency(stats.average_ticket)}")


def cmd_sale(args: argparse.Namespace) -> None:
    """Register a sale."""
    if not is_valid_sale_amount(args.amount):
        logger.error(f"Invalid sale amount: {args.amount}")
        sys.exit(1)
    sale = open_ledger(args).add_sale(
        args.amount, PaymentMethod(args.method), args.observation
    )
    logger.success(f"✅ Sale registered: {sale.id}")
    print(sale.id)


def cmd_expense(args: argparse.Namespace) -> None:
    """Register an expense."""
    if not is_valid_expense(args.description, args.amount):
        logger.error("Expense needs a description and an amount greater than zero")
        sys.exit(1)
    expense = open_ledger(args).add_expense(args.description, args.amount)
    logger.success(f"✅ Expense registered: {expense.id}")
    print(expense.id)


def cmd_capital(args: argparse.Namespace) -> None:
    """Set the initial capital."""
    open_ledger(args).update_capital(args.amount)
    logger.success(f"✅ Initial capital set to {format_currency(args.amount)}")


def cmd_delete_sale(args: argparse.Namespace) -> None:
    open_ledger(args).delete_sale(args.id)


def cmd_delete_expense(args: argparse.Namespace) -> None:
    open_ledger(args).delete_expense(args.id)


def cmd_history(args: argparse.Namespace) -> None:
    """List sales grouped per day, newest first."""
    groups = group_sales_by_day(open_ledger(args).data.sales)
    if not groups:
        logger.info("No sales registered")
        return

    for group in groups:
        print(f"{group.date_label} ({group.day_name}) - total {format_currency(group.total)}")
        for sale in group.sales:
            details = sale.observation or "Sem detalhes"
            print(
                f"  {format_time(sale.timestamp)}  {format_currency(sale.amount):>14}  "
                f"{sale.payment_method.value:<8}  {details}  [{sale.id}]"
            )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CB Controle - Stall sales ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--data-dir", type=str, help="Ledger directory (default: settings)")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    parser_stats = subparsers.add_parser("stats", help="Show dashboard statistics")
    parser_stats.add_argument("--json", action="store_true", help="Print as JSON")
    parser_stats.set_defaults(func=cmd_stats)

    parser_sale = subparsers.add_parser("sale", help="Register a sale")
    parser_sale.add_argument("amount", type=float, help="Sale amount in R$")
    parser_sale.add_argument(
        "--method",
        choices=[method.value for method in PaymentMethod],
        default=PaymentMethod.PIX.value,
        help="Payment method (default: PIX)",
    )
    parser_sale.add_argument("--observation", type=str, default=None, help="Free text details")
    parser_sale.set_defaults(func=cmd_sale)

    parser_expense = subparsers.add_parser("expense", help="Register an expense")
    parser_expense.add_argument("description", type=str)
    parser_expense.add_argument("amount", type=float, help="Expense amount in R$")
    parser_expense.set_defaults(func=cmd_expense)

    parser_capital = subparsers.add_parser("capital", help="Set the initial capital")
    parser_capital.add_argument("amount", type=float)
    parser_capital.set_defaults(func=cmd_capital)

    parser_delete_sale = subparsers.add_parser("delete-sale", help="Delete a sale by id")
    parser_delete_sale.add_argument("id", type=str)
    parser_delete_sale.set_defaults(func=cmd_delete_sale)

    parser_delete_expense = subparsers.add_parser("delete-expense", help="Delete an expense by id")
    parser_delete_expense.add_argument("id", type=str)
    parser_delete_expense.set_defaults(func=cmd_delete_expense)

    parser_history = subparsers.add_parser("history", help="List sales per day")
    parser_history.set_defaults(func=cmd_history)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point with CLI argument parsing."""
    configure_logging(settings.log_level)
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
