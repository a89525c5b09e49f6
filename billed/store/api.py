"""HTTP client for the Billed REST backend."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from billed.errors import BillNotFoundError, StoreError
from billed.identity import KeyValueStore
from billed.models.bill import Bill, CreatedBill
from billed.models.upload import BillUpload
from billed.store.base import BillsResource, Store

logger = logging.getLogger(__name__)


class ApiStore(Store):
    """
    Store backed by the REST API.
    Authenticates with the ``jwt`` key of the local key-value store when one is present.
    """

    def __init__(
        self,
        base_url: str,
        kv: KeyValueStore,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.kv = kv
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        jwt = self.kv.get_item("jwt")
        if jwt:
            return {"Authorization": f"Bearer {jwt}"}
        return {}

    async def request(self, method: str, path: str, *, bill_id: str | None = None, **kwargs: Any) -> Any:
        """Send one request and return the decoded JSON body (``None`` when empty)."""
        headers = {**self._headers(), **kwargs.pop("headers", {})}
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise StoreError(f"{method} {path} failed: {exc}") from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        if not response.is_success:
            _raise_for_response(response, bill_id)
        if not response.content:
            return None
        return response.json()

    def bills(self) -> ApiBills:
        return ApiBills(self, "bills")


def _parse(model: type[BaseModel], data: Any, what: str):
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise StoreError(f"Unexpected {what} in response: {exc.error_count()} invalid field(s)") from exc


def _raise_for_response(response: httpx.Response, bill_id: str | None) -> None:
    if response.status_code == 404 and bill_id is not None:
        raise BillNotFoundError(bill_id)
    message = response.reason_phrase or "Request failed"
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        message = str(body["message"])
    raise StoreError(message, status_code=response.status_code)


class ApiBills(BillsResource):
    def __init__(self, api: ApiStore, key: str) -> None:
        self.api = api
        self.key = key

    async def create(self, upload: BillUpload) -> CreatedBill:
        # Multipart body: httpx sets the boundary content type itself.
        data = await self.api.request(
            "POST",
            f"/{self.key}",
            files={"file": (upload.file.name, upload.file.content, upload.file.type)},
            data={"email": upload.email},
        )
        created = _parse(CreatedBill, data, "upload result")
        logger.info(
            "Uploaded %s (%d bytes) for %s: bill=%s", upload.file.name, upload.file.size, upload.email, created.id
        )
        return created

    async def update(self, bill: Bill) -> Bill:
        if bill.id is None:
            raise ValueError("Cannot update bill without an id")
        data = await self.api.request(
            "PATCH",
            f"/{self.key}/{bill.id}",
            bill_id=bill.id,
            json=bill.to_wire(include_id=False, include_server_fields=False),
        )
        if not data:
            return bill
        return _parse(Bill, {"id": bill.id, **data}, "bill")

    async def list(self) -> list[Bill]:
        data = await self.api.request("GET", f"/{self.key}")
        return [_parse(Bill, item, "bill") for item in data or []]

    async def select(self, bill_id: str) -> Bill:
        data = await self.api.request("GET", f"/{self.key}/{bill_id}", bill_id=bill_id)
        return _parse(Bill, data, "bill")

    async def delete(self, bill_id: str) -> None:
        await self.api.request("DELETE", f"/{self.key}/{bill_id}", bill_id=bill_id)
        logger.info("Deleted bill %s", bill_id)
