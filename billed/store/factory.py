import logging

from billed.identity import KeyValueStore
from billed.settings import settings
from billed.store.base import Store

logger = logging.getLogger(__name__)


def get_store(kv: KeyValueStore, email: str | None = None) -> Store:
    """Build the bill store selected by ``settings.store_backend``.

    ``email`` scopes listings of the local store to one employee; the API scopes by token.
    """
    backend = settings.store_backend

    if backend == "api":
        from billed.store.api import ApiStore

        logger.info("Using store backend: api url=%s", settings.api_url)
        return ApiStore(settings.api_url, kv, timeout=settings.api_timeout)

    if backend == "local":
        from billed.repositories.factory import get_bill_repository
        from billed.services.bill_service import BillService
        from billed.storage.factory import get_storage
        from billed.store.local import LocalStore

        logger.info("Using store backend: local db")
        return LocalStore(BillService(get_bill_repository(), get_storage()), email=email)

    raise ValueError(f"Unsupported store backend: {backend}")
