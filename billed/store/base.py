from __future__ import annotations

from abc import ABC, abstractmethod

from billed.models.bill import Bill, CreatedBill
from billed.models.upload import BillUpload


class BillsResource(ABC):
    @abstractmethod
    async def create(self, upload: BillUpload) -> CreatedBill:
        """Upload a receipt and open a provisional bill for it."""
        ...

    @abstractmethod
    async def update(self, bill: Bill) -> Bill:
        """Overwrite the bill identified by ``bill.id`` and return the stored version."""
        ...

    @abstractmethod
    async def list(self) -> list[Bill]: ...

    @abstractmethod
    async def select(self, bill_id: str) -> Bill: ...

    @abstractmethod
    async def delete(self, bill_id: str) -> None: ...


class Store(ABC):
    @abstractmethod
    def bills(self) -> BillsResource: ...
