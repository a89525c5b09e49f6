from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# Set by an admin on the backend only.
SERVER_FIELDS = {"comment_admin"}


class Bill(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    email: str = ""
    type: str = ""
    name: str = ""
    amount: int | float | None = None
    date: str = ""  # 'YYYY-MM-DD'
    vat: str = ""
    pct: int = 20
    commentary: str = ""
    file_url: str | None = Field(default=None, alias="fileUrl")
    file_name: str | None = Field(default=None, alias="fileName")
    status: str | None = None
    comment_admin: str = Field(default="", alias="commentAdmin")
    # Internal storage key of the receipt, never sent over the wire.
    file_key: str | None = Field(default=None, exclude=True)
    created_at: datetime | None = Field(default=None, exclude=True)

    def to_wire(self, *, include_id: bool = True, include_server_fields: bool = True) -> dict:
        """Serialize with the camelCase field names the REST backend expects.

        Employee updates pass ``include_server_fields=False`` so the admin's
        ``commentAdmin`` is never overwritten.
        """
        exclude = set()
        if not include_id:
            exclude.add("id")
        if not include_server_fields:
            exclude.update(SERVER_FIELDS)
        return self.model_dump(by_alias=True, exclude=exclude or None)


class CreatedBill(BaseModel):
    """Response of a file upload: the provisional bill id and where the file landed."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "key"))
    file_url: str = Field(alias="fileUrl")
    file_path: str | None = Field(default=None, alias="filePath")


ALLOWED_FILE_TYPES = {"image/jpeg", "image/jpg", "image/png"}
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MB
