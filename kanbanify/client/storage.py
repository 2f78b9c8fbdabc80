"""Client-side persisted key/value storage.

Mirrors the browser's ``localStorage``: string keys, string values, no
expiry and no integrity protection. Anything kept here is under the user's
control and must not be trusted by the server.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

ADMIN_SESSION_KEY = "admin-authenticated"
BOARD_ACCESS_KEY = "board-access"
CURRENT_BOARD_KEY = "kanbanify-current-board-id"


class LocalStorage:
    """String key/value store persisted as a single JSON document.

    With no ``path`` the storage lives in memory only.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path).expanduser() if path else None
        self._items: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable client storage at %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(key): str(value) for key, value in data.items()}

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(self._items, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)
        self._save()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._save()

    def clear(self) -> None:
        self._items.clear()
        self._save()

    def keys(self) -> List[str]:
        return list(self._items)
