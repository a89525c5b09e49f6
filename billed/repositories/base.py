from abc import ABC, abstractmethod

from billed.models.bill import Bill


class BillRepository(ABC):
    @abstractmethod
    def create(self, bill: Bill, bill_id: str | None = None) -> Bill: ...

    @abstractmethod
    def get_by_id(self, bill_id: str) -> Bill | None: ...

    @abstractmethod
    def list_all(self) -> list[Bill]: ...

    @abstractmethod
    def list_by_email(self, email: str) -> list[Bill]: ...

    @abstractmethod
    def update(self, bill: Bill) -> Bill: ...

    @abstractmethod
    def delete(self, bill_id: str) -> None: ...
