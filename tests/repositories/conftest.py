import pytest
from sqlalchemy import Connection

from billed.repositories.sqlalchemy import SQLAlchemyBillRepository


@pytest.fixture()
def bill_repo(db_connection: Connection) -> SQLAlchemyBillRepository:
    return SQLAlchemyBillRepository(db_connection)
