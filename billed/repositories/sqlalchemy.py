from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Connection, text
from sqlalchemy.engine import RowMapping
from ulid import ULID

from billed.errors import BillNotFoundError
from billed.models.bill import Bill
from billed.repositories.base import BillRepository


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SQLAlchemyBillRepository(BillRepository):
    def __init__(self, conn: Connection) -> None:
        self.conn = conn

    @staticmethod
    def _row_to_bill(row: RowMapping) -> Bill:
        return Bill(
            id=row["id"],
            email=row["email"],
            type=row["type"],
            name=row["name"],
            amount=row["amount"],
            date=row["date"],
            vat=row["vat"],
            pct=row["pct"],
            commentary=row["commentary"],
            file_url=row["file_url"],
            file_name=row["file_name"],
            file_key=row["file_key"],
            status=row["status"],
            comment_admin=row["comment_admin"],
            created_at=row["created_at"],
        )

    @staticmethod
    def _params(bill: Bill) -> dict:
        return {
            "email": bill.email,
            "type": bill.type,
            "name": bill.name,
            "amount": bill.amount,
            "date": bill.date,
            "vat": bill.vat,
            "pct": bill.pct,
            "commentary": bill.commentary,
            "file_url": bill.file_url,
            "file_name": bill.file_name,
            "file_key": bill.file_key,
            "status": bill.status,
            "comment_admin": bill.comment_admin,
        }

    def create(self, bill: Bill, bill_id: str | None = None) -> Bill:
        bill_id = bill_id or str(ULID())
        now = _now()
        self.conn.execute(
            text(
                "INSERT INTO bills (id, email, type, name, amount, date, vat, pct, commentary, "
                "file_url, file_name, file_key, status, comment_admin, created_at, updated_at) "
                "VALUES (:id, :email, :type, :name, :amount, :date, :vat, :pct, :commentary, "
                ":file_url, :file_name, :file_key, :status, :comment_admin, :created_at, :updated_at)"
            ),
            {**self._params(bill), "id": bill_id, "created_at": now, "updated_at": now},
        )
        self.conn.commit()
        created = self.get_by_id(bill_id)
        if created is None:
            raise RuntimeError(f"Failed to retrieve bill after create (id={bill_id})")
        return created

    def get_by_id(self, bill_id: str) -> Bill | None:
        row = (
            self.conn.execute(
                text("SELECT * FROM bills WHERE id = :id"),
                {"id": bill_id},
            )
            .mappings()
            .fetchone()
        )
        if row is None:
            return None
        return self._row_to_bill(row)

    def list_all(self) -> list[Bill]:
        rows = self.conn.execute(text("SELECT * FROM bills ORDER BY date DESC, id DESC")).mappings().fetchall()
        return [self._row_to_bill(row) for row in rows]

    def list_by_email(self, email: str) -> list[Bill]:
        rows = (
            self.conn.execute(
                text("SELECT * FROM bills WHERE email = :email ORDER BY date DESC, id DESC"),
                {"email": email},
            )
            .mappings()
            .fetchall()
        )
        return [self._row_to_bill(row) for row in rows]

    def update(self, bill: Bill) -> Bill:
        if bill.id is None:
            raise ValueError("Cannot update bill without an id")
        result = self.conn.execute(
            text(
                "UPDATE bills SET email = :email, type = :type, name = :name, amount = :amount, "
                "date = :date, vat = :vat, pct = :pct, commentary = :commentary, "
                "file_url = :file_url, file_name = :file_name, file_key = :file_key, "
                "status = :status, comment_admin = :comment_admin, updated_at = :updated_at "
                "WHERE id = :id"
            ),
            {**self._params(bill), "id": bill.id, "updated_at": _now()},
        )
        self.conn.commit()
        if result.rowcount == 0:
            raise BillNotFoundError(bill.id)
        updated = self.get_by_id(bill.id)
        if updated is None:
            raise BillNotFoundError(bill.id)
        return updated

    def delete(self, bill_id: str) -> None:
        self.conn.execute(
            text("DELETE FROM bills WHERE id = :id"),
            {"id": bill_id},
        )
        self.conn.commit()
