"""Store that persists bills in the local database and receipts in a storage backend."""

from __future__ import annotations

import asyncio
import logging

from billed.models.bill import Bill, CreatedBill
from billed.models.upload import BillUpload
from billed.services.bill_service import BillService
from billed.store.base import BillsResource, Store

logger = logging.getLogger(__name__)


class LocalStore(Store):
    def __init__(self, bill_service: BillService, email: str | None = None) -> None:
        self.bill_service = bill_service
        self.email = email

    def bills(self) -> LocalBills:
        return LocalBills(self.bill_service, self.email)


class LocalBills(BillsResource):
    """Runs the blocking service calls in a worker thread."""

    def __init__(self, bill_service: BillService, email: str | None = None) -> None:
        self.bill_service = bill_service
        self.email = email

    async def create(self, upload: BillUpload) -> CreatedBill:
        bill = await asyncio.to_thread(
            self.bill_service.create_bill,
            upload.file.name,
            upload.file.content,
            upload.file.type,
            upload.email,
        )
        return CreatedBill(id=bill.id, file_url=bill.file_url, file_path=bill.file_key)

    async def update(self, bill: Bill) -> Bill:
        return await asyncio.to_thread(self.bill_service.update_bill, bill)

    async def list(self) -> list[Bill]:
        return await asyncio.to_thread(self.bill_service.list_bills, self.email)

    async def select(self, bill_id: str) -> Bill:
        return await asyncio.to_thread(self.bill_service.get_bill, bill_id)

    async def delete(self, bill_id: str) -> None:
        await asyncio.to_thread(self.bill_service.delete_bill, bill_id)
