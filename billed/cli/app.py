from __future__ import annotations

import logging

import questionary
from rich.console import Console

from billed.cli.bills_menu import bills_view
from billed.cli.new_bill_menu import new_bill_menu
from billed.constants import ROUTES_PATH
from billed.identity import KeyValueStore, LocalStorageIdentity
from billed.models.user import User
from billed.settings import settings
from billed.store.base import Store
from billed.store.factory import get_store

logger = logging.getLogger(__name__)

console = Console()


class Navigator:
    """Records the route requested by a view; the menu loop renders it."""

    def __init__(self) -> None:
        self.current = ROUTES_PATH["NewBill"]

    def __call__(self, path: str) -> None:
        logger.debug("Navigate %s -> %s", self.current, path)
        self.current = path


def _ensure_user(identity: LocalStorageIdentity) -> User | None:
    user = identity.current_user()
    if user is not None and user.email:
        return user

    email = questionary.text("Votre e-mail:").ask()
    if not email:
        return None
    user = User(type="Employee", email=email)
    identity.remember(user)
    return user


def _render(navigator: Navigator, store: Store) -> None:
    if navigator.current == ROUTES_PATH["Bills"]:
        bills_view(store)


def main_menu() -> None:
    kv = KeyValueStore(settings.local_storage_path)
    identity = LocalStorageIdentity(kv)

    console.print()
    console.print("[bold]Billed[/bold] · notes de frais", style="cyan")
    console.print()

    user = _ensure_user(identity)
    if user is None:
        console.print("[yellow]Aucun utilisateur, au revoir.[/yellow]")
        return

    store = get_store(kv, email=user.email)
    navigator = Navigator()

    while True:
        choice = questionary.select(
            "Menu principal",
            choices=[
                "Nouvelle note de frais",
                "Mes notes de frais",
                "Quitter",
            ],
        ).ask()

        if choice is None or choice == "Quitter":
            console.print("[bold]À bientôt ![/bold]")
            break
        elif choice == "Nouvelle note de frais":
            navigator(ROUTES_PATH["NewBill"])
            new_bill_menu(store, identity, navigator)
            _render(navigator, store)
        elif choice == "Mes notes de frais":
            navigator(ROUTES_PATH["Bills"])
            _render(navigator, store)
