import logging
from pathlib import Path

from billed.storage.base import StorageBackend

logger = logging.getLogger(__name__)


class LocalStorage(StorageBackend):
    def __init__(self, base_dir: str) -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def save(self, key: str, data: bytes, content_type: str = "image/jpeg") -> str:
        path = self.base_dir / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.debug("Saved %s (%d bytes, %s) to %s", key, len(data), content_type, path.resolve())
        return key

    def get(self, key: str) -> bytes:
        resolved = (self.base_dir / key).resolve()
        logger.debug("Reading %s from %s", key, resolved)
        return resolved.read_bytes()

    def get_url(self, key: str) -> str:
        url = (self.base_dir / key).resolve().as_uri()
        logger.debug("Resolved URL for %s: %s", key, url)
        return url

    def delete(self, key: str) -> None:
        path = self.base_dir / key
        path.unlink(missing_ok=True)
        logger.debug("Deleted %s", key)
