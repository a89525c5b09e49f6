from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadedFile:
    name: str
    type: str
    content: bytes = b""

    @classmethod
    def from_path(cls, path: str | Path) -> UploadedFile:
        """Read a file from disk, guessing its MIME type from the extension."""
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(name=path.name, type=content_type or "application/octet-stream", content=path.read_bytes())

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class BillUpload:
    """Multipart payload of a bill creation: the receipt and its owner."""

    file: UploadedFile
    email: str
