from billed.repositories.base import BillRepository


def get_bill_repository() -> BillRepository:
    from billed.db import get_connection
    from billed.repositories.sqlalchemy import SQLAlchemyBillRepository

    return SQLAlchemyBillRepository(get_connection())
