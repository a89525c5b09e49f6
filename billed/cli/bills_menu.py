from __future__ import annotations

import asyncio
import logging

from rich.console import Console
from rich.table import Table

from billed.constants import format_amount, format_date, format_status
from billed.errors import StoreError
from billed.models.bill import Bill
from billed.store.base import Store

logger = logging.getLogger(__name__)

console = Console()


def _sort_key(bill: Bill) -> str:
    return bill.date or ""


def bills_view(store: Store) -> None:
    """Render the employee's bills, most recent first."""
    console.print()
    console.print("[bold]Mes notes de frais[/bold]", style="cyan")

    try:
        bills = asyncio.run(store.bills().list())
    except StoreError as exc:
        logger.error("Could not list bills: %s", exc)
        console.print(f"[red]Impossible de charger les notes de frais: {exc}[/red]")
        return

    if not bills:
        console.print("[yellow]Aucune note de frais.[/yellow]")
        return

    table = Table()
    table.add_column("Type")
    table.add_column("Nom")
    table.add_column("Date")
    table.add_column("Montant", justify="right")
    table.add_column("Statut", justify="center")

    for bill in sorted(bills, key=_sort_key, reverse=True):
        table.add_row(
            bill.type,
            bill.name,
            format_date(bill.date),
            format_amount(bill.amount),
            format_status(bill.status),
        )

    console.print(table)
