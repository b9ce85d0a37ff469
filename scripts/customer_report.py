#!/usr/bin/env python3
"""
Prints customer statistics, or one customer's service history, to the terminal.

Usage:
    python scripts/customer_report.py                      # All customers
    python scripts/customer_report.py --sort totalSpent    # Sorted by spend (descending)
    python scripts/customer_report.py --customer <id>      # History analysis for one customer
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from salon.container import set_container
from salon.operations import customers, history
from salon.repositories.json_store.factory import create_json_container

console = Console()


def _yen(value: int) -> str:
    return f"¥{value:,}"


def show_customers(sort_by: str):
    views = customers.list_customers(sort_by=sort_by, sort_order="asc" if sort_by == "name" else "desc")

    table = Table(title=f"Customers ({len(views)})")
    table.add_column("ID", style="dim", max_width=10)
    table.add_column("Name", style="cyan")
    table.add_column("Phone")
    table.add_column("Visits", justify="right")
    table.add_column("Spent", justify="right", style="green")
    table.add_column("Average", justify="right")
    table.add_column("Last visit")
    table.add_column("Favorites", style="yellow")

    for view in views:
        stats = view.statistics
        table.add_row(
            view.customer.id[:8],
            view.customer.name,
            view.customer.phone,
            str(stats.total_visits),
            _yen(stats.total_spent),
            _yen(stats.average_spent),
            stats.last_visit.strftime("%Y-%m-%d") if stats.last_visit else "-",
            ", ".join(stats.favorite_services),
        )
    console.print(table)


def show_customer(customer_id: str):
    view = customers.get_customer(customer_id)
    if not view:
        console.print(f"[red]Customer not found: {customer_id}[/red]")
        return

    console.print(Panel(f"{view.customer.name}  {view.customer.phone}", title="Customer"))

    service_ids = list(dict.fromkeys(s.id for a in view.appointments for s in a.services))
    results = history.analyze_adjustments(customer_id, service_ids)
    if not results:
        console.print("[dim]No completed appointments yet[/dim]")
        return

    table = Table(title="Service history (completed appointments)")
    table.add_column("Service", style="cyan")
    table.add_column("Uses", justify="right")
    table.add_column("Base", justify="right", style="dim")
    table.add_column("Latest", justify="right")
    table.add_column("Average", justify="right")
    table.add_column("Most common", justify="right")
    table.add_column("Recent trend", justify="right")

    for r in results:
        table.add_row(
            r.service_name,
            str(r.frequency),
            f"{_yen(r.base_price)} / {r.base_duration}min",
            f"{_yen(r.latest_price)} / {r.latest_duration}min",
            f"{_yen(r.average_price)} / {r.average_duration}min",
            f"{_yen(r.most_common_price)} / {r.most_common_duration}min",
            f"{_yen(r.recent_trend_price)} / {r.recent_trend_duration}min",
        )
    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Customer report")
    parser.add_argument("--data-dir", help="Directory for the JSON files (default: SALON_DATA_DIR)")
    parser.add_argument("--customer", help="Show the history analysis for this customer ID")
    parser.add_argument(
        "--sort",
        default="name",
        choices=list(customers.SORT_FIELDS),
        help="Sort field for the customer list",
    )
    args = parser.parse_args()

    set_container(create_json_container(args.data_dir))

    if args.customer:
        show_customer(args.customer)
    else:
        show_customers(args.sort)


if __name__ == "__main__":
    main()
