import logging
from pathlib import Path

from alembic.config import Config
from sqlalchemy import Connection, create_engine
from sqlalchemy.engine import Engine, make_url

from alembic import command
from billed.settings import settings

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

_engine: Engine | None = None
_connection: Connection | None = None


def _engine_options(db_url: str) -> dict:
    # The local store reaches SQLite from asyncio.to_thread workers.
    if make_url(db_url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_recycle": 1800}


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_engine(settings.db_url, **_engine_options(settings.db_url))
        logger.info("Bills database: %s", make_url(settings.db_url).render_as_string(hide_password=True))
    return _engine


def get_connection() -> Connection:
    """Connection shared by the local store; the controller issues one call at a time."""
    global _connection
    if _connection is None:
        _connection = get_engine().connect()
        logger.debug("Opened bills database connection")
    return _connection


def close_db() -> None:
    global _engine, _connection
    if _connection is not None:
        _connection.close()
        _connection = None
    if _engine is not None:
        _engine.dispose()
        _engine = None
        logger.debug("Disposed bills database engine")


def _get_alembic_config() -> Config:
    ini_path = PROJECT_ROOT / "alembic.ini"
    cfg = Config(str(ini_path)) if ini_path.exists() else Config()
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", settings.db_url)
    return cfg


def initialize_db() -> None:
    """Upgrade the bills schema to the latest revision."""
    logger.info("Migrating bills database")
    command.upgrade(_get_alembic_config(), "head")
