from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from billed.models.user import User

logger = logging.getLogger(__name__)


class KeyValueStore:
    """String key-value store with the browser ``localStorage`` API.

    Kept in memory when ``path`` is None, otherwise persisted as a JSON object.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._items: dict[str, str] = {}
        if self.path is not None and self.path.exists():
            self._items = json.loads(self.path.read_text(encoding="utf-8") or "{}")
            logger.debug("Loaded %d keys from %s", len(self._items), self.path)

    def _flush(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._items, ensure_ascii=False, indent=2), encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)
        self._flush()


class IdentityProvider(ABC):
    @abstractmethod
    def current_user(self) -> User | None: ...


class LocalStorageIdentity(IdentityProvider):
    USER_KEY = "user"

    def __init__(self, kv: KeyValueStore) -> None:
        self.kv = kv

    def current_user(self) -> User | None:
        raw = self.kv.get_item(self.USER_KEY)
        if raw is None:
            return None
        try:
            return User.model_validate_json(raw)
        except ValidationError:
            logger.warning("Ignoring malformed %r entry in local storage", self.USER_KEY)
            return None

    def remember(self, user: User) -> None:
        self.kv.set_item(self.USER_KEY, user.model_dump_json())
