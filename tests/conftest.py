"""Root conftest: in-memory SQLite schema, sample bills and a mocked store."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Connection, create_engine, text
from sqlalchemy.engine import Engine

from billed.identity import KeyValueStore, LocalStorageIdentity
from billed.models.bill import Bill, CreatedBill
from billed.models.user import User

# Matches Alembic head: 3f1c9a7d2b10 (create bills)
SCHEMA_DDL = """
CREATE TABLE bills (
    id VARCHAR(26) PRIMARY KEY,
    email VARCHAR(255) NOT NULL DEFAULT '',
    type VARCHAR(100) NOT NULL DEFAULT '',
    name TEXT NOT NULL DEFAULT '',
    amount REAL,
    date VARCHAR(10) NOT NULL DEFAULT '',
    vat VARCHAR(20) NOT NULL DEFAULT '',
    pct INTEGER NOT NULL DEFAULT 20,
    commentary TEXT NOT NULL DEFAULT '',
    file_url TEXT,
    file_name TEXT,
    file_key TEXT,
    status VARCHAR(20),
    comment_admin TEXT NOT NULL DEFAULT '',
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL
);

CREATE INDEX ix_bills_email ON bills (email);
"""

STAGED_FILE_URL = "https://localhost:3456/images/test.jpg"
STAGED_BILL_ID = "1234"


@pytest.fixture()
def db_engine() -> Engine:
    return create_engine("sqlite:///:memory:", connect_args={"check_same_thread": False})


@pytest.fixture()
def db_connection(db_engine: Engine) -> Connection:
    conn = db_engine.connect()
    for statement in SCHEMA_DDL.strip().split(";"):
        stmt = statement.strip()
        if stmt:
            conn.execute(text(stmt))
    conn.commit()
    yield conn
    conn.close()


def _sample_bill(**overrides) -> Bill:
    defaults = dict(
        id="47qAXb6fIm2zOKkLzMro",
        vat="80",
        file_url="https://firebasestorage.googleapis.com/v0/b/billable-677b6.appspot.com/o/justificatifs%2Fpreview-facture-free-201801-pdf-1.jpg",
        status="pending",
        type="Hôtel et logement",
        commentary="séminaire billed",
        name="encore",
        file_name="preview-facture-free-201801-pdf-1.jpg",
        date="2004-04-04",
        amount=400,
        comment_admin="ok",
        email="a@a",
        pct=20,
    )
    defaults.update(overrides)
    return Bill(**defaults)


@pytest.fixture()
def sample_bill():
    return _sample_bill


def _mocked_store(bills: list[Bill] | None = None) -> MagicMock:
    resource = MagicMock()
    resource.create = AsyncMock(return_value=CreatedBill(id=STAGED_BILL_ID, file_url=STAGED_FILE_URL))
    resource.update = AsyncMock(side_effect=lambda bill: bill)
    resource.list = AsyncMock(return_value=list(bills or []))
    store = MagicMock()
    store.bills.return_value = resource
    return store


@pytest.fixture()
def mocked_store() -> MagicMock:
    return _mocked_store()


@pytest.fixture()
def kv() -> KeyValueStore:
    return KeyValueStore()


@pytest.fixture()
def identity(kv: KeyValueStore) -> LocalStorageIdentity:
    identity = LocalStorageIdentity(kv)
    identity.remember(User(type="Employee", email="employee@test.tld"))
    return identity
