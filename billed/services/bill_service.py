from __future__ import annotations

import logging
import re

from ulid import ULID

from billed.constants import DEFAULT_STATUS
from billed.errors import BillNotFoundError
from billed.models.bill import ALLOWED_FILE_TYPES, MAX_FILE_SIZE, Bill
from billed.repositories.base import BillRepository
from billed.settings import settings
from billed.storage.base import StorageBackend

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _safe_filename(filename: str) -> str:
    base = re.split(r"[\\/]", filename)[-1]
    cleaned = _UNSAFE_CHARS.sub("_", base).strip("._")
    return cleaned or "receipt"


def _file_storage_key(bill_id: str, filename: str) -> str:
    prefix = settings.storage_prefix
    if prefix:
        return f"{prefix}/{bill_id}/{_safe_filename(filename)}"
    return f"{bill_id}/{_safe_filename(filename)}"


class BillService:
    def __init__(self, bill_repo: BillRepository, storage: StorageBackend) -> None:
        self.bill_repo = bill_repo
        self.storage = storage

    def create_bill(self, filename: str, file_bytes: bytes, content_type: str, email: str) -> Bill:
        """Store a receipt and open the provisional bill it belongs to."""
        content_type = (content_type or "").lower()
        if content_type not in ALLOWED_FILE_TYPES:
            raise ValueError(f"Unsupported file type: {content_type}")
        if not file_bytes:
            raise ValueError("Empty file")
        if len(file_bytes) > MAX_FILE_SIZE:
            raise ValueError("File too large")

        bill_id = str(ULID())
        key = _file_storage_key(bill_id, filename)
        self.storage.save(key, file_bytes, content_type=content_type)

        bill = Bill(
            email=email,
            file_url=self.storage.get_url(key),
            file_name=key.rsplit("/", 1)[-1],
            file_key=key,
            status=DEFAULT_STATUS,
        )
        bill = self.bill_repo.create(bill, bill_id=bill_id)
        logger.info("Bill created: id=%s, email=%s, file=%s", bill.id, email, key)
        return bill

    def update_bill(self, bill: Bill) -> Bill:
        if bill.id is None:
            raise ValueError("Cannot update bill without an id")
        existing = self.bill_repo.get_by_id(bill.id)
        if existing is None:
            raise BillNotFoundError(bill.id)

        # Reviewer comments and the stored file are owned by the store.
        merged = bill.model_copy(
            update={
                "comment_admin": existing.comment_admin,
                "file_key": existing.file_key,
                "file_url": bill.file_url or existing.file_url,
                "file_name": bill.file_name or existing.file_name,
            }
        )
        updated = self.bill_repo.update(merged)
        logger.info("Bill updated: id=%s, status=%s, amount=%s", updated.id, updated.status, updated.amount)
        return updated

    def list_bills(self, email: str | None = None) -> list[Bill]:
        if email:
            result = self.bill_repo.list_by_email(email)
        else:
            result = self.bill_repo.list_all()
        logger.debug("Listed %d bills for email=%s", len(result), email or "*")
        return result

    def get_bill(self, bill_id: str) -> Bill:
        bill = self.bill_repo.get_by_id(bill_id)
        logger.debug("get_bill id=%s found=%s", bill_id, bill is not None)
        if bill is None:
            raise BillNotFoundError(bill_id)
        return bill

    def delete_bill(self, bill_id: str) -> None:
        bill = self.get_bill(bill_id)
        if bill.file_key:
            self.storage.delete(bill.file_key)
        self.bill_repo.delete(bill_id)
        logger.info("Bill %s deleted", bill_id)
