"""Controller behind the new bill form: receipt upload, then bill submission."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from billed.constants import DEFAULT_PCT, DEFAULT_STATUS, ROUTES_PATH
from billed.identity import IdentityProvider
from billed.models.bill import ALLOWED_FILE_TYPES, Bill
from billed.models.upload import BillUpload
from billed.store.base import Store
from billed.views.dom import Document, Event, FileInput, Form

logger = logging.getLogger(__name__)

INVALID_CLASS = "is-invalid"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_NUMBER = re.compile(r"^\s*([+-]?\d+(?:[.,]\d+)?)")


@dataclass(frozen=True)
class Unstaged:
    pass


@dataclass(frozen=True)
class Staged:
    bill_id: str
    file_url: str
    file_name: str


@dataclass(frozen=True)
class Submitted:
    bill: Bill


SessionState = Unstaged | Staged | Submitted


def is_allowed_file_type(content_type: str | None) -> bool:
    return bool(content_type) and content_type.lower() in ALLOWED_FILE_TYPES


def file_name_from_key(key: str) -> str:
    """Last path segment of a storage key or client path ('a/b\\c.jpg' -> 'c.jpg')."""
    return re.split(r"[\\/]", key)[-1]


def parse_int(value: str | None) -> int | None:
    """Integer prefix of a form value, None when it does not start with a number."""
    match = _LEADING_INT.match(value or "")
    return int(match.group(1)) if match else None


def parse_number(value: str | None) -> int | float | None:
    """Leading decimal number of a form value ('12,50 €' -> 12.5), None when there is none."""
    match = _LEADING_NUMBER.match(value or "")
    if not match:
        return None
    number = float(match.group(1).replace(",", "."))
    return int(number) if number.is_integer() else number


class NewBill:
    def __init__(
        self,
        document: Document,
        on_navigate: Callable[[str], None],
        store: Store | None,
        identity: IdentityProvider,
    ) -> None:
        self.document = document
        self.on_navigate = on_navigate
        self.store = store
        self.identity = identity

        self.state: SessionState = Unstaged()
        self.file_is_valid = False

        self.form: Form = document.get_by_test_id("form-new-bill")
        self.file_input: FileInput = document.get_by_test_id("file")
        self.form.add_event_listener("submit", self.handle_submit)
        self.file_input.add_event_listener("change", self.handle_change_file)

    @property
    def bill_id(self) -> str | None:
        return self._staged_value("bill_id")

    @property
    def file_url(self) -> str | None:
        return self._staged_value("file_url")

    @property
    def file_name(self) -> str | None:
        return self._staged_value("file_name")

    def _staged_value(self, attr: str) -> str | None:
        if isinstance(self.state, Staged):
            return getattr(self.state, attr)
        if isinstance(self.state, Submitted):
            return self.state.bill.id if attr == "bill_id" else getattr(self.state.bill, attr)
        return None

    def _current_email(self) -> str:
        user = self.identity.current_user()
        return user.email if user is not None else ""

    def _reject_file(self, reason: str) -> None:
        self.file_input.class_list.add(INVALID_CLASS)
        self.file_input.value = ""
        self.file_is_valid = False
        logger.warning("Receipt rejected: %s", reason)

    async def handle_change_file(self, event: Event) -> None:
        event.prevent_default()
        if isinstance(self.state, Submitted):
            logger.info("Bill %s already submitted, ignoring file change", self.state.bill.id)
            return

        file = self.file_input.files[0] if self.file_input.files else None
        if file is None:
            self._reject_file("no file selected")
            return
        if not is_allowed_file_type(file.type):
            self._reject_file(f"unsupported type {file.type!r} for {file.name}")
            return

        self.file_input.class_list.discard(INVALID_CLASS)
        self.file_is_valid = True
        if self.store is None:
            return

        upload = BillUpload(file=file, email=self._current_email())
        try:
            created = await self.store.bills().create(upload)
        except Exception:
            logger.exception("Receipt upload failed for %s", file.name)
            return

        self.state = Staged(
            bill_id=created.id,
            file_url=created.file_url,
            file_name=file_name_from_key(created.file_path or file.name),
        )
        logger.info("Receipt staged: bill=%s file=%s", created.id, self.state.file_name)

    def _read_bill(self, form: Form, staged: Staged) -> Bill:
        values = form.values()
        pct = parse_int(values.get("pct"))
        return Bill(
            id=staged.bill_id,
            email=self._current_email(),
            type=values.get("type", ""),
            name=values.get("name", ""),
            amount=parse_number(values.get("amount")),
            date=values.get("date", ""),
            vat=values.get("vat", ""),
            pct=DEFAULT_PCT if pct is None else pct,
            commentary=values.get("commentary", ""),
            file_url=staged.file_url,
            file_name=staged.file_name,
            status=DEFAULT_STATUS,
        )

    async def handle_submit(self, event: Event) -> None:
        event.prevent_default()
        if isinstance(self.state, Submitted):
            logger.info("Bill %s already submitted", self.state.bill.id)
            return
        if not self.file_is_valid:
            logger.warning("Submit blocked: no valid receipt selected")
            return
        if not isinstance(self.state, Staged):
            logger.warning("Submit blocked: receipt upload has not completed")
            return

        form = event.target if isinstance(event.target, Form) else self.form
        await self.update_bill(self._read_bill(form, self.state))

    async def update_bill(self, bill: Bill) -> None:
        if self.store is None:
            return
        try:
            updated = await self.store.bills().update(bill)
        except Exception:
            logger.exception("Bill update failed for %s", bill.id)
            return

        self.state = Submitted(updated if isinstance(updated, Bill) else bill)
        logger.info("Bill submitted: id=%s", bill.id)
        self.on_navigate(ROUTES_PATH["Bills"])
