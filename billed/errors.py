from __future__ import annotations


class StoreError(Exception):
    """A store call failed: HTTP error, transport failure or rejected operation."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"


class BillNotFoundError(StoreError):
    def __init__(self, bill_id: str) -> None:
        super().__init__(f"Bill not found: {bill_id}", status_code=404)
        self.bill_id = bill_id
