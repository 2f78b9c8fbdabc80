"""Client-side admin and board access gates.

Both gates are conveniences, not security boundaries: the admin flag and the
list of unlocked boards are unsigned values in :class:`LocalStorage` with no
expiry, and anyone able to edit that file can set them.
"""

import json
import logging
from typing import List

import httpx

from kanbanify.client.api import ApiClient, ApiError
from kanbanify.client.storage import ADMIN_SESSION_KEY, BOARD_ACCESS_KEY, LocalStorage

logger = logging.getLogger(__name__)


def is_admin_session(storage: LocalStorage) -> bool:
    return storage.get_item(ADMIN_SESSION_KEY) == "true"


def set_admin_session(storage: LocalStorage, is_admin: bool) -> None:
    if is_admin:
        storage.set_item(ADMIN_SESSION_KEY, "true")
    else:
        storage.remove_item(ADMIN_SESSION_KEY)


def logout_admin(storage: LocalStorage) -> None:
    storage.remove_item(ADMIN_SESSION_KEY)


async def login_admin(api: ApiClient, storage: LocalStorage, password: str) -> bool:
    """Check ``password`` with the server and remember a successful login."""
    try:
        await api.post("admin/login", json={"password": password})
    except (ApiError, httpx.HTTPError) as exc:
        logger.info("Admin login rejected: %s", exc)
        return False
    set_admin_session(storage, True)
    return True


def get_board_access(storage: LocalStorage) -> List[str]:
    raw = storage.get_item(BOARD_ACCESS_KEY)
    if not raw:
        return []
    try:
        board_ids = json.loads(raw)
    except ValueError:
        return []
    if not isinstance(board_ids, list):
        return []
    return [str(board_id) for board_id in board_ids]


def has_board_access(storage: LocalStorage, board_id: str) -> bool:
    return board_id in get_board_access(storage)


def add_board_access(storage: LocalStorage, board_id: str) -> None:
    current = get_board_access(storage)
    if board_id not in current:
        current.append(board_id)
    storage.set_item(BOARD_ACCESS_KEY, json.dumps(current))


def remove_board_access(storage: LocalStorage, board_id: str) -> None:
    updated = [item for item in get_board_access(storage) if item != board_id]
    storage.set_item(BOARD_ACCESS_KEY, json.dumps(updated))


def clear_all_board_access(storage: LocalStorage) -> None:
    storage.remove_item(BOARD_ACCESS_KEY)


async def validate_board_access(api: ApiClient, board_id: str, access_code: str) -> bool:
    try:
        await api.post(f"boards/{board_id}/access", json={"accessCode": access_code})
    except (ApiError, httpx.HTTPError) as exc:
        logger.info("Access code rejected for board %s: %s", board_id, exc)
        return False
    return True


async def unlock_board(api: ApiClient, storage: LocalStorage, board_id: str, access_code: str) -> bool:
    """Validate ``access_code`` and remember the board only when it matches."""
    if not await validate_board_access(api, board_id, access_code):
        return False
    add_board_access(storage, board_id)
    return True
