from __future__ import annotations

import asyncio
import re
from collections.abc import Callable
from datetime import date

import questionary
from rich.console import Console

from billed.constants import BILL_TYPES, DEFAULT_PCT
from billed.containers.new_bill import INVALID_CLASS, NewBill, Submitted, parse_number
from billed.identity import IdentityProvider
from billed.models.upload import UploadedFile
from billed.store.base import Store
from billed.views.dom import Event
from billed.views.new_bill_ui import new_bill_ui

console = Console()

_AMOUNT = re.compile(r"\d+(?:[.,]\d{1,2})?")


def _valid_date(value: str) -> bool | str:
    try:
        date.fromisoformat(value)
        return True
    except ValueError:
        return "Format attendu: AAAA-MM-JJ"


def _valid_amount(value: str) -> bool | str:
    parsed = parse_number(value)
    if parsed is None or parsed < 0 or not _AMOUNT.fullmatch(value.strip()):
        return "Montant invalide"
    return True


def _stage_receipt(controller: NewBill) -> bool:
    """Ask for a receipt until one is accepted and uploaded. False when cancelled or failed."""
    file_input = controller.file_input
    while True:
        path = questionary.path("Justificatif (jpg, jpeg ou png):").ask()
        if not path:
            return False
        try:
            file_input.files = [UploadedFile.from_path(path)]
        except OSError as exc:
            console.print(f"[red]Impossible de lire le fichier: {exc}[/red]")
            continue
        file_input.value = path

        asyncio.run(file_input.dispatch_event(Event.change(file_input)))

        if INVALID_CLASS in file_input.class_list:
            console.print("[red]Format non supporté. Choisissez une image jpg, jpeg ou png.[/red]")
            continue
        if controller.bill_id is None:
            console.print("[red]L'envoi du justificatif a échoué.[/red]")
            return False
        console.print(f"  [green]Justificatif envoyé: {controller.file_name}[/green]")
        return True


def new_bill_menu(store: Store, identity: IdentityProvider, on_navigate: Callable[[str], None]) -> None:
    console.print()
    console.print("[bold]Envoyer une note de frais[/bold]", style="cyan")

    document = new_bill_ui()
    controller = NewBill(document=document, on_navigate=on_navigate, store=store, identity=identity)

    if not _stage_receipt(controller):
        console.print("[yellow]Opération annulée.[/yellow]")
        return

    answers = {
        "expense-type": questionary.select("Type de dépense:", choices=BILL_TYPES).ask(),
        "expense-name": questionary.text("Nom de la dépense:").ask(),
        "datepicker": questionary.text("Date (AAAA-MM-JJ):", validate=_valid_date).ask(),
        "amount": questionary.text("Montant TTC (€):", validate=_valid_amount).ask(),
        "vat": questionary.text("TVA (€):").ask(),
        "pct": questionary.text("TVA (%):", default=str(DEFAULT_PCT)).ask(),
        "commentary": questionary.text("Commentaire (optionnel):").ask(),
    }
    if any(value is None for value in answers.values()):
        console.print("[yellow]Opération annulée.[/yellow]")
        return

    form = controller.form
    for test_id, value in answers.items():
        form.field(test_id).value = value

    asyncio.run(form.dispatch_event(Event.submit(form)))

    if isinstance(controller.state, Submitted):
        console.print("[green bold]Note de frais envoyée ![/green bold]")
    else:
        console.print("[red]L'envoi de la note de frais a échoué.[/red]")
